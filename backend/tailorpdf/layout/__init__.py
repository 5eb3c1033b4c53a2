"""
Text-to-layout engine: resume text in, paginated PDF out.
"""
from .builder import build_resume_pdf
from .classify import (
    BodyClassifier, Blank, ClassifiedLine, JobEntry, LineKind, PlainText,
    SectionHeader, SkillsCategory, classify_body,
)
from .dates import format_date
from .emphasis import split_emphasis
from .flow import DrawnText, PageCursor, PageFlowEngine
from .measure import FontPair, load_fonts, text_width
from .parser import HeaderInfo, ParsedDocument, parse_resume
from .wrap import wrap_text

__all__ = [
    "build_resume_pdf",
    "BodyClassifier",
    "Blank",
    "ClassifiedLine",
    "JobEntry",
    "LineKind",
    "PlainText",
    "SectionHeader",
    "SkillsCategory",
    "classify_body",
    "format_date",
    "split_emphasis",
    "DrawnText",
    "PageCursor",
    "PageFlowEngine",
    "FontPair",
    "load_fonts",
    "text_width",
    "HeaderInfo",
    "ParsedDocument",
    "parse_resume",
    "wrap_text",
]

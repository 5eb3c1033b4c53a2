"""
Body line classifier.

Classification is purely syntactic and order matters: blank, section
header (trailing colon), job entry ("Role at Company: Period"), skills
category (leading middle dot), then plain text.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Union

JOB_ENTRY_RE = re.compile(r"^(.+?) at (.+?):\s*(.+)$")
SKILLS_BULLET = "·"
SKILLS_HEADER = "skills:"


class LineKind(Enum):
    BLANK = "blank"
    SECTION_HEADER = "section_header"
    JOB_ENTRY = "job_entry"
    SKILLS_CATEGORY = "skills_category"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class Blank:
    kind: LineKind = field(default=LineKind.BLANK, init=False)


@dataclass(frozen=True)
class SectionHeader:
    text: str
    kind: LineKind = field(default=LineKind.SECTION_HEADER, init=False)


@dataclass(frozen=True)
class JobEntry:
    title: str
    company: str
    period: str
    kind: LineKind = field(default=LineKind.JOB_ENTRY, init=False)


@dataclass(frozen=True)
class SkillsCategory:
    name: str
    kind: LineKind = field(default=LineKind.SKILLS_CATEGORY, init=False)


@dataclass(frozen=True)
class PlainText:
    # may contain **bold** spans; parsed at render time
    text: str
    kind: LineKind = field(default=LineKind.PLAIN_TEXT, init=False)


ClassifiedLine = Union[Blank, SectionHeader, JobEntry, SkillsCategory, PlainText]


class BodyClassifier:
    """Classifies body lines one at a time, tracking whether the Skills section is open."""

    def __init__(self):
        self.in_skills_section = False

    def classify(self, raw: str) -> ClassifiedLine:
        line = raw.strip()
        if not line:
            return Blank()

        if line.endswith(":"):
            self.in_skills_section = line.lower() == SKILLS_HEADER
            return SectionHeader(text=line)

        match = JOB_ENTRY_RE.match(line)
        if match:
            title, company, period = (g.strip() for g in match.groups())
            return JobEntry(title=title, company=company, period=period)

        if line.startswith(SKILLS_BULLET):
            return SkillsCategory(name=line[len(SKILLS_BULLET):].strip())

        return PlainText(text=line)


def classify_body(lines: Iterable[str]) -> Iterator[ClassifiedLine]:
    classifier = BodyClassifier()
    for line in lines:
        yield classifier.classify(line)

"""
Page flow engine: draws classified resume lines top to bottom onto a
ReportLab canvas, starting a new page whenever the cursor drops under
the bottom margin.

Pagination is checked before and after every drawn line and once more
after each body line, so a single wrapped line is never split across
pages and nothing already drawn is moved.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from . import styles
from .classify import (
    Blank, ClassifiedLine, JobEntry, LineKind, PlainText, SectionHeader, SkillsCategory,
)
from .dates import format_date
from .emphasis import draw_emphasis
from .measure import FontPair
from .parser import HeaderInfo
from .styles import A4, PageGeometry, StyleToken
from .wrap import wrap_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawnText:
    page: int
    x: float
    y: float
    text: str
    font: str
    size: float


class PageCursor:
    """Current page number and vertical position; y decreases as content is drawn."""

    def __init__(self, canvas, geometry: PageGeometry = A4):
        self.canvas = canvas
        self.geometry = geometry
        self.page_number = 1
        self.y = geometry.top

    def advance(self, dy: float):
        self.y -= dy

    def paginate(self) -> bool:
        if self.y >= self.geometry.margin_bottom:
            return False
        # showPage keeps the canvas page size, so every page matches the first
        self.canvas.showPage()
        self.page_number += 1
        self.y = self.geometry.top
        return True


class PageFlowEngine:
    def __init__(self, canvas, fonts: Optional[FontPair] = None, geometry: PageGeometry = A4):
        self.canvas = canvas
        self.fonts = fonts or FontPair()
        self.geometry = geometry
        self.cursor = PageCursor(canvas, geometry)
        self.drawn: List[DrawnText] = []
        self._handlers: Dict[LineKind, Callable] = {
            LineKind.BLANK: self._flow_blank,
            LineKind.SECTION_HEADER: self._flow_section_header,
            LineKind.JOB_ENTRY: self._flow_job_entry,
            LineKind.SKILLS_CATEGORY: self._flow_skills_category,
            LineKind.PLAIN_TEXT: self._flow_plain_text,
        }

    @property
    def pages_used(self) -> int:
        return max((d.page for d in self.drawn), default=1)

    def draw_header(self, header: HeaderInfo):
        """Name, contact line and the rule under them, at the top of the first page."""
        if header.name:
            self._draw_block(header.name.upper(), styles.NAME)
            self.cursor.advance(styles.NAME_GAP)
        else:
            self.cursor.advance(styles.NAME.line_height)

        contact = header.contact_parts
        if contact:
            self._draw_block(" • ".join(contact), styles.CONTACT)
            self.cursor.advance(styles.CONTACT_GAP)

        y = self.cursor.y
        self.canvas.setStrokeColor(styles.DARK_BLUE)
        self.canvas.setLineWidth(styles.RULE_THICKNESS)
        self.canvas.line(self.geometry.margin_left, y, self.geometry.right, y)
        self.cursor.advance(styles.RULE_GAP)

    def flow(self, lines: Iterable[ClassifiedLine]):
        count = 0
        for line in lines:
            handler = self._handlers.get(line.kind)
            if handler is None:
                raise ValueError(f"No layout rule for line kind {line.kind!r}")
            handler(line)
            self.cursor.paginate()
            count += 1
        logger.debug(f"Flowed {count} body lines onto {self.pages_used} page(s)")

    # --- per-kind rules ---

    def _flow_blank(self, line: Blank):
        self.cursor.advance(styles.BLANK_GAP)

    def _flow_section_header(self, line: SectionHeader):
        self.cursor.advance(styles.SECTION_GAP)
        self._draw_block(line.text, styles.SECTION_HEADER)

    def _flow_job_entry(self, line: JobEntry):
        self.cursor.advance(styles.JOB_GAP)
        self._draw_block(line.title, styles.JOB_TITLE)
        self._draw_block(line.company, styles.COMPANY)
        self._draw_block(format_date(line.period), styles.PERIOD)
        self.cursor.advance(styles.JOB_TRAILING_GAP)

    def _flow_skills_category(self, line: SkillsCategory):
        self._draw_block(line.name, styles.SKILLS_CATEGORY)

    def _flow_plain_text(self, line: PlainText):
        style = styles.BODY
        regular = self.fonts.face(style.font)
        bold = self.fonts.face(styles.INLINE_BOLD.font)
        x = self.geometry.margin_left + style.indent
        for wrapped in wrap_text(line.text, regular, style.size, style.wrap_width(self.geometry)):
            self.cursor.paginate()
            runs = draw_emphasis(self.canvas, wrapped, x, self.cursor.y, style.size, style.color, regular, bold)
            for run in runs:
                self._record(run.x, run.text, run.font, style.size)
            self.cursor.advance(style.line_height)
            self.cursor.paginate()

    def _draw_block(self, text: str, style: StyleToken):
        font = self.fonts.face(style.font)
        x = self.geometry.margin_left + style.indent
        for wrapped in wrap_text(text, font, style.size, style.wrap_width(self.geometry)):
            self.cursor.paginate()
            self.canvas.setFont(font, style.size)
            self.canvas.setFillColor(style.color)
            self.canvas.drawString(x, self.cursor.y, wrapped)
            self._record(x, wrapped, font, style.size)
            self.cursor.advance(style.line_height)
            self.cursor.paginate()

    def _record(self, x: float, text: str, font: str, size: float):
        self.drawn.append(DrawnText(self.cursor.page_number, x, self.cursor.y, text, font, size))

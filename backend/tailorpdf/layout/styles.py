"""
Page geometry and per-line-kind styles (A4, points).
"""
from dataclasses import dataclass

from reportlab.lib.colors import Color

BLACK = Color(0, 0, 0)
DARK_BLUE = Color(0.1, 0.2, 0.4)    # name, section headers, rule
MEDIUM_BLUE = Color(0.2, 0.4, 0.6)  # job titles, skills categories
GRAY = Color(0.4, 0.4, 0.4)         # company, period
DARK_GRAY = Color(0.2, 0.2, 0.2)    # contact line


@dataclass(frozen=True)
class PageGeometry:
    width: float = 595
    height: float = 842
    margin_top: float = 72
    margin_bottom: float = 50
    margin_left: float = 50
    margin_right: float = 50

    @property
    def content_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def top(self) -> float:
        return self.height - self.margin_top

    @property
    def right(self) -> float:
        return self.width - self.margin_right


A4 = PageGeometry()


@dataclass(frozen=True)
class StyleToken:
    font: str  # "regular" or "bold"
    size: float
    color: Color
    line_height: float
    indent: float = 0
    # extra width taken off the right edge when wrapping
    inset: float = 0

    def wrap_width(self, geometry: PageGeometry) -> float:
        return geometry.content_width - self.indent - self.inset


BODY_SIZE = 11
BODY_LINE_HEIGHT = BODY_SIZE * 1.4

NAME = StyleToken("bold", 24, DARK_BLUE, 24 * 0.8)
CONTACT = StyleToken("regular", 9, DARK_GRAY, 9 * 1.5)
SECTION_HEADER = StyleToken("bold", 14, DARK_BLUE, 14 * 1.5)
JOB_TITLE = StyleToken("bold", BODY_SIZE + 1, MEDIUM_BLUE, BODY_LINE_HEIGHT + 2, indent=10)
COMPANY = StyleToken("regular", BODY_SIZE, GRAY, BODY_LINE_HEIGHT, indent=10)
PERIOD = StyleToken("regular", BODY_SIZE - 1, GRAY, BODY_LINE_HEIGHT - 2, indent=10)
SKILLS_CATEGORY = StyleToken("bold", BODY_SIZE + 1, MEDIUM_BLUE, BODY_LINE_HEIGHT + 2, indent=10, inset=10)
BODY = StyleToken("regular", BODY_SIZE, BLACK, BODY_LINE_HEIGHT, indent=10)
INLINE_BOLD = StyleToken("bold", BODY_SIZE, BLACK, BODY_LINE_HEIGHT, indent=10)

# vertical gaps
NAME_GAP = 2
CONTACT_GAP = 4
RULE_GAP = 16
RULE_THICKNESS = 1.5
BLANK_GAP = 6
SECTION_GAP = 12
JOB_GAP = 8
JOB_TRAILING_GAP = 4

import os
from dataclasses import dataclass
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

REGULAR_FACE = "ResumeSans"
BOLD_FACE = "ResumeSans-Bold"


@dataclass(frozen=True)
class FontPair:
    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"

    def face(self, role: str) -> str:
        return self.bold if role == "bold" else self.regular


def text_width(text: str, font: str, size: float) -> float:
    """Rendered width of `text` in points at the given font and size."""
    return pdfmetrics.stringWidth(text, font, size)


def load_fonts(regular_path: Optional[str] = None, bold_path: Optional[str] = None) -> FontPair:
    """
    Resolve the regular/bold faces used for a document.

    Both TrueType paths must be given (argument or FONT_REGULAR_PATH /
    FONT_BOLD_PATH) to embed custom faces; otherwise the built-in
    Helvetica pair is used.
    """
    regular_path = regular_path or os.getenv("FONT_REGULAR_PATH")
    bold_path = bold_path or os.getenv("FONT_BOLD_PATH")
    if not (regular_path and bold_path):
        return FontPair()

    # registerFont replaces an existing entry of the same name
    pdfmetrics.registerFont(TTFont(REGULAR_FACE, regular_path))
    pdfmetrics.registerFont(TTFont(BOLD_FACE, bold_path))
    return FontPair(regular=REGULAR_FACE, bold=BOLD_FACE)

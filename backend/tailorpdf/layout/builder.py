import logging
from io import BytesIO
from typing import Optional

from reportlab.pdfgen import canvas

from .classify import classify_body
from .flow import PageFlowEngine
from .measure import FontPair, load_fonts
from .parser import parse_resume
from .styles import A4, PageGeometry

logger = logging.getLogger(__name__)


def build_resume_pdf(resume_text: str, fonts: Optional[FontPair] = None,
                     geometry: PageGeometry = A4) -> bytes:
    """Lay out tailored resume text as a paginated PDF and return its bytes."""
    parsed = parse_resume(resume_text)
    fonts = fonts or load_fonts()

    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=(geometry.width, geometry.height))
    engine = PageFlowEngine(c, fonts, geometry)
    engine.draw_header(parsed.header)
    engine.flow(classify_body(parsed.body_lines))
    c.save()

    pdf = buf.getvalue()
    logger.debug(f"Rendered resume PDF: {engine.pages_used} page(s), {len(pdf)} bytes")
    return pdf

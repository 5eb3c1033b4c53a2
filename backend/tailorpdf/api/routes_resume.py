"""
Tailored resume endpoint: job description in, resume PDF out.
"""
from fastapi import APIRouter, Form
from fastapi.responses import Response
from typing import Optional
import asyncio
import logging
import os
import re

from ..ai_services import get_ai_service
from ..errors import ConfigurationError, ServiceError, ValidationError
from ..layout import build_resume_pdf
from ..schemas import ErrorOut
from ..tailor import tailor_resume

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["resume"])

UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_]")


def pdf_filename(candidate: str, company: str, role: str) -> str:
    parts = (UNSAFE_FILENAME_CHARS.sub("_", p) for p in (candidate, company, role))
    return "_".join(parts) + ".pdf"


@router.post(
    "/generate-dynamic-resume-pdf",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
)
async def generate_dynamic_resume_pdf(
    job_description: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
):
    if not job_description or not company or not role:
        raise ValidationError("Missing required fields: job_description, company, role")

    if not os.getenv("OPENAI_API_KEY"):
        raise ConfigurationError("OpenAI API key not configured")

    try:
        tailored = await tailor_resume(get_ai_service(), job_description)
    except Exception as e:
        logger.error(f"Resume tailoring failed: {e}")
        raise ServiceError("Internal server error", details=str(e)) from e

    if not tailored.strip():
        raise ServiceError("Failed to generate tailored resume content")

    try:
        pdf = await asyncio.to_thread(build_resume_pdf, tailored)
    except Exception as e:
        logger.exception("PDF generation failed")
        raise ServiceError("Internal server error", details=str(e)) from e

    filename = pdf_filename(os.getenv("CANDIDATE_NAME", "Louis Bailey"), company, role)
    logger.info(f"Generated {filename} ({len(pdf)} bytes)")
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

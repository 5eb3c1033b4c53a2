from pydantic import BaseModel
from typing import Optional


class ErrorOut(BaseModel):
    error: str
    details: Optional[str] = None


class HealthOut(BaseModel):
    ok: bool
    ai_configured: bool

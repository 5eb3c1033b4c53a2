"""
Error taxonomy for the resume PDF service.

Every error raised past a layout or service boundary derives from
ResumeServiceError so the API layer can turn it into a JSON body.
"""
from typing import Any, Dict, Optional


class ResumeServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.message}: {self.details}" if self.details else self.message

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(ResumeServiceError):
    """Missing or empty required request fields."""
    status_code = 400


class ConfigurationError(ResumeServiceError):
    """A required credential or setting is not configured."""
    status_code = 500


class ServiceError(ResumeServiceError):
    """The completion call or the render pipeline failed."""
    status_code = 500


class FormatError(ResumeServiceError):
    """A date token could not be normalised (e.g. month outside 1-12)."""
    status_code = 500

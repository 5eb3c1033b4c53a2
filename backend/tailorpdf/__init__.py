"""
Tailored resume PDF service.

Sends a base resume and a job description to a language model and lays
the rewritten resume text out as a styled, paginated PDF.
"""

__version__ = "1.0.0"

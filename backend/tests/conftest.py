import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure backend package is importable when running from the repo root
backend_root = Path(__file__).resolve().parents[1]
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))


SAMPLE_RESUME = """
Senior Software Engineer

Louis Bailey
louis@example.com
+1 (409) 941 2954
San Antonio, TX, USA
linkedin.com/in/louisbailey


Summary:
Backend engineer with **10+ years** building APIs in Python and Go.

Skills:
· Backend
Python, FastAPI, Django, PostgreSQL

Professional Experience:
Senior Engineer at Acme Corp: 01/2020 - 02/2022
• Built REST APIs serving **2M requests/day** with FastAPI.
"""


class FakeCanvas:
    """Records the ReportLab canvas calls the layout engine makes."""

    def __init__(self):
        self.pages = 1
        self.strings = []  # (page, x, y, text, font, size)
        self.lines = []
        self._font = None

    def setFont(self, font, size):
        self._font = (font, size)

    def setFillColor(self, color):
        pass

    def setStrokeColor(self, color):
        pass

    def setLineWidth(self, width):
        pass

    def line(self, x1, y1, x2, y2):
        self.lines.append((self.pages, x1, y1, x2, y2))

    def drawString(self, x, y, text):
        font, size = self._font
        self.strings.append((self.pages, x, y, text, font, size))

    def showPage(self):
        self.pages += 1


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def fake_canvas():
    return FakeCanvas()


@pytest.fixture
def client(monkeypatch):
    """Provide a FastAPI TestClient with an isolated environment."""
    monkeypatch.setenv("CORS_ORIGINS", "*")
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.delenv("CANDIDATE_NAME", raising=False)
    monkeypatch.delenv("BASE_RESUME_PATH", raising=False)
    monkeypatch.delenv("FONT_REGULAR_PATH", raising=False)
    monkeypatch.delenv("FONT_BOLD_PATH", raising=False)

    from tailorpdf.main import app  # type: ignore

    return TestClient(app)

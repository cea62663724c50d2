"""Shared test configuration, markers and PDF fixtures."""

import io
import os

import pytest

# Must be set before config.settings is first imported
os.environ["GEMINI_API_KEY"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the full HTTP stack with real PDFs"
    )


def build_pdf(pages: list[str]) -> bytes:
    """Render one PDF page per string (lines split on newlines) with reportlab."""
    from reportlab.lib.pagesizes import A4
    from reportlab.pdfgen import canvas

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    _, height = A4
    for page_text in pages:
        c.setFont("Helvetica", 12)
        y = height - 60
        for line in page_text.split("\n"):
            if line:
                c.drawString(50, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def sample_resume_pdf():
    return build_pdf([
        "Jane Smith - Senior Frontend Engineer\n"
        "6 years experience building React and TypeScript applications\n"
        "Led migration to Docker based deployments on AWS",
        "Skills: JavaScript, TypeScript, React, Docker, Git, Agile",
    ])

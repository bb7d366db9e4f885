"""PDF report rendering with ReportLab Platypus.

The report has a fixed layout, drawn top to bottom:

  1. centered "Mindset Report" title
  2. gap
  3. "Mindset Score: {score}"
  4. "Strategy: {coaching plan title}"
  5. gap
  6. coaching plan description, wrapped to ``BODY_WIDTH`` points

Rendering is synchronous and in-process.  The finished document is
handed to the server as a byte string and streamed out in chunks by
``iter_chunks``.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Iterator
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from mindset_analysis.constants import (
    BODY_FONT_SIZE,
    BODY_WIDTH,
    HEADLINE_FONT_SIZE,
    LINE_GAP,
    REPORT_TITLE,
    STREAM_CHUNK_SIZE,
    TITLE_FONT_SIZE,
)
from mindset_analysis.errors import ReportRenderError
from mindset_analysis.models import ReportRequest

logger = logging.getLogger(__name__)


def _build_styles() -> dict[str, ParagraphStyle]:
    """Paragraph styles for the title, headline lines and body text."""
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "MindsetTitle",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=TITLE_FONT_SIZE,
            leading=TITLE_FONT_SIZE * 1.2,
            alignment=TA_CENTER,
        ),
        "headline": ParagraphStyle(
            "MindsetHeadline",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=HEADLINE_FONT_SIZE,
            leading=HEADLINE_FONT_SIZE * 1.2,
            alignment=TA_LEFT,
        ),
        "body": ParagraphStyle(
            "MindsetBody",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=BODY_FONT_SIZE,
            leading=BODY_FONT_SIZE * 1.2,
            alignment=TA_LEFT,
        ),
    }


def _safe(text: object) -> str:
    """Escape caller text for ReportLab's XML-based paragraph parser."""
    return escape(str(text))


def _multiline(text: object) -> str:
    """Escape ``text`` and keep its line breaks, which Paragraph folds into spaces."""
    return _safe(text).replace("\r\n", "\n").replace("\n", "<br/>")


class ReportRenderer:
    """Renders ``ReportRequest`` objects into PDF bytes.

    Args:
        page_compression: deflate page content streams.  Disable to get
            text operators in clear, e.g. when inspecting output in tests.
    """

    def __init__(self, page_compression: bool = True) -> None:
        self._page_compression = page_compression
        self._styles = _build_styles()

    def render(self, request: ReportRequest) -> bytes:
        """Render the report and return the finished document.

        Raises:
            ReportRenderError: the layout engine failed.
        """
        buffer = BytesIO()
        page_width, _ = letter
        side_margin = (page_width - BODY_WIDTH) / 2

        doc = SimpleDocTemplate(
            buffer,
            pagesize=letter,
            leftMargin=side_margin,
            rightMargin=side_margin,
            title=REPORT_TITLE,
            pageCompression=1 if self._page_compression else 0,
        )

        plan = request.coaching_plan
        story = [
            Paragraph(REPORT_TITLE, self._styles["title"]),
            Spacer(1, LINE_GAP),
            Paragraph(f"Mindset Score: {_safe(request.score)}", self._styles["headline"]),
            Paragraph(f"Strategy: {_safe(plan.title)}", self._styles["headline"]),
            Spacer(1, LINE_GAP),
            Paragraph(_multiline(plan.description), self._styles["body"]),
        ]

        try:
            doc.build(story)
        except Exception as exc:
            logger.exception("PDF rendering failed")
            raise ReportRenderError(str(exc)) from exc

        return buffer.getvalue()


def iter_chunks(data: bytes, chunk_size: int = STREAM_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield ``data`` in ``chunk_size`` slices for a streaming response."""
    for start in range(0, len(data), chunk_size):
        yield data[start:start + chunk_size]

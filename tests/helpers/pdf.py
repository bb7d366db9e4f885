"""Text extraction for rendered PDF reports."""

from io import BytesIO

from pypdf import PdfReader


def pdf_text(data: bytes) -> str:
    """Concatenated page text of a PDF document."""
    reader = PdfReader(BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def pdf_lines(data: bytes) -> list[str]:
    """Non-empty, stripped text lines of a PDF document."""
    return [line.strip() for line in pdf_text(data).splitlines() if line.strip()]

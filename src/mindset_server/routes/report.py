"""Report endpoint — renders the fixed-layout PDF and streams it back.

Declared as a plain ``def`` so FastAPI runs the synchronous rendering in
its threadpool instead of on the event loop.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from mindset_analysis.constants import REPORT_FILENAME
from mindset_analysis.models import ReportRequest
from mindset_analysis.report import ReportRenderer, iter_chunks

from mindset_server.dependencies import get_renderer

router = APIRouter(tags=["report"])


@router.post("/report")
def generate_report(
    body: ReportRequest,
    renderer: ReportRenderer = Depends(get_renderer),
) -> StreamingResponse:
    """Render the mindset report PDF as an attachment.

    The document is fully rendered before the first byte is sent, so a
    rendering failure still produces a JSON error instead of a truncated
    PDF.
    """
    pdf = renderer.render(body)
    headers = {"Content-Disposition": f"attachment; filename={REPORT_FILENAME}"}
    return StreamingResponse(
        iter_chunks(pdf),
        media_type="application/pdf",
        headers=headers,
    )

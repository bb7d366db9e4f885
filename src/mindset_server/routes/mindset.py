"""Analysis endpoint — questionnaire responses in, generated report text out.

The handler suspends on the completion call; other requests keep being
served meanwhile.  Failures surface as SDK errors and are rendered by the
global handlers in ``mindset_server.errors``.
"""

from fastapi import APIRouter, Depends

from mindset_analysis.analyzer import MindsetAnalyzer
from mindset_analysis.models import AnalysisRequest, AnalysisResult

from mindset_server.dependencies import get_analyzer

router = APIRouter(tags=["mindset"])


@router.post("/mindset")
async def analyze_mindset(
    body: AnalysisRequest,
    analyzer: MindsetAnalyzer = Depends(get_analyzer),
) -> AnalysisResult:
    """Generate the business mindset analysis for the submitted responses.

    Returns ``{result: "..."}``.  Errors: 400 invalid body, 502 empty
    completion, upstream status on API errors, 500 otherwise.
    """
    return await analyzer.analyze(body.responses)

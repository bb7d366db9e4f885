"""Request and response models — the contract between the SDK and API callers.

All models are transient: they live for the duration of one request and
are never persisted.

  - AnalysisRequest / AnalysisResult: body and reply of the analysis endpoint
  - CoachingPlan / ReportRequest: body of the report endpoint

``MindsetResponses`` is deliberately untyped beyond "a JSON object"; the
answers are only serialized into the LLM prompt, never interpreted here.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

# Question identifier -> answer (string, number, or nested structure)
MindsetResponses = dict[str, Any]


class AnalysisRequest(BaseModel):
    """Body for POST /api/mindset."""

    responses: MindsetResponses


class AnalysisResult(BaseModel):
    """Generated analysis text, returned verbatim."""

    result: str


class CoachingPlan(BaseModel):
    """Recommended action plan rendered into the PDF report."""

    title: str
    description: str


class ReportRequest(BaseModel):
    """Body for POST /api/report.

    The wire format uses ``coachingPlan``; Python callers may use either
    the alias or ``coaching_plan``.
    """

    model_config = ConfigDict(populate_by_name=True)

    score: Union[int, float, str]
    coaching_plan: CoachingPlan = Field(alias="coachingPlan")

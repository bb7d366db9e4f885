"""mindset_analysis — Business mindset analysis SDK.

Public API:
    MindsetAnalyzer  — renders the prompt and runs one completion per request
    PromptManager    — Jinja2 renderer for the analysis instructions
    build_prompt     — shortcut using the packaged template
    TextGenerator    — ABC for completion backends
    OpenAIGenerator  — chat-completion backend
    ReportRenderer   — fixed-layout PDF report renderer

Models:
    AnalysisRequest, AnalysisResult, CoachingPlan, ReportRequest

Errors:
    MindsetError and its subclasses InvalidInput, SerializationError,
    EmptyCompletion, UpstreamError, UnknownError, ReportRenderError
"""

from mindset_analysis.analyzer import MindsetAnalyzer
from mindset_analysis.errors import (
    EmptyCompletion,
    InvalidInput,
    MindsetError,
    ReportRenderError,
    SerializationError,
    UnknownError,
    UpstreamError,
)
from mindset_analysis.generator import OpenAIGenerator, TextGenerator, build_openai_client
from mindset_analysis.models import (
    AnalysisRequest,
    AnalysisResult,
    CoachingPlan,
    MindsetResponses,
    ReportRequest,
)
from mindset_analysis.prompt import PromptManager, build_prompt
from mindset_analysis.report import ReportRenderer, iter_chunks

__all__ = [
    # Orchestration
    "MindsetAnalyzer",
    "PromptManager",
    "build_prompt",
    "ReportRenderer",
    "iter_chunks",
    # Generators
    "TextGenerator",
    "OpenAIGenerator",
    "build_openai_client",
    # Models
    "AnalysisRequest",
    "AnalysisResult",
    "CoachingPlan",
    "MindsetResponses",
    "ReportRequest",
    # Errors
    "MindsetError",
    "InvalidInput",
    "SerializationError",
    "EmptyCompletion",
    "UpstreamError",
    "UnknownError",
    "ReportRenderError",
]

"""FastAPI dependency injection — provides the analyzer and the renderer.

The analyzer and renderer are built once by ``create_app()`` and
stashed on ``app.state``; routes receive them through these providers so
tests can swap the generator without touching the environment.
"""

from fastapi import Request

from mindset_analysis.analyzer import MindsetAnalyzer
from mindset_analysis.report import ReportRenderer


def get_analyzer(request: Request) -> MindsetAnalyzer:
    """Return the analyzer singleton from ``app.state``."""
    return request.app.state.analyzer


def get_renderer(request: Request) -> ReportRenderer:
    """Return the report renderer singleton from ``app.state``."""
    return request.app.state.renderer

"""MindsetAnalyzer — turns questionnaire responses into a generated report.

Flow for one request::

    responses ──► build_prompt ──► TextGenerator.complete ──► AnalysisResult

The analyzer is the error boundary of the analysis path: SDK errors
(``MindsetError`` subclasses) pass through unchanged, anything else is
logged and wrapped in ``UnknownError`` so the server always answers
with a structured body.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from mindset_analysis.errors import (
    EmptyCompletion,
    InvalidInput,
    MindsetError,
    UnknownError,
)
from mindset_analysis.generator import TextGenerator
from mindset_analysis.models import AnalysisResult
from mindset_analysis.prompt import PromptManager

logger = logging.getLogger(__name__)


class MindsetAnalyzer:
    """Orchestrates prompt rendering and the completion call.

    Args:
        generator: backend that produces the report text
        prompts: optional prompt renderer; defaults to the packaged template
    """

    def __init__(
        self,
        generator: TextGenerator,
        prompts: PromptManager | None = None,
    ) -> None:
        self._generator = generator
        self._prompts = prompts or PromptManager()

    async def analyze(self, responses: Any) -> AnalysisResult:
        """Generate the mindset report for ``responses``.

        Raises:
            InvalidInput: ``responses`` is not a mapping (generator not called)
            EmptyCompletion: the service returned no usable text
            UpstreamError: the service rejected the request
            UnknownError: any other failure
        """
        if not isinstance(responses, Mapping):
            raise InvalidInput('Invalid or missing "responses" in request body')

        try:
            prompt = self._prompts.render_mindset_prompt(responses)
            content = await self._generator.complete(prompt)
        except MindsetError:
            raise
        except Exception as exc:
            logger.exception("Completion request failed")
            raise UnknownError(str(exc)) from exc

        if not content:
            raise EmptyCompletion()

        return AnalysisResult(result=content)

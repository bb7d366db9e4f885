"""Error taxonomy for the mindset analysis SDK.

Every error carries the HTTP status it maps to and the JSON body the
server sends back, so the web layer needs a single handler for all of
them:

  - InvalidInput       400  client data failed a shape check
  - SerializationError 400  responses could not be embedded in the prompt
  - EmptyCompletion    502  the LLM answered but produced no usable text
  - UpstreamError      ---  the LLM API rejected the call (status passed through)
  - UnknownError       500  anything else on the analysis path
  - ReportRenderError  500  the PDF engine failed
"""

from __future__ import annotations

from typing import Any


class MindsetError(Exception):
    """Base class — subclasses set ``status_code`` and shape ``to_content()``."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict[str, Any]:
        return {"error": self.message}


class InvalidInput(MindsetError):
    """Request data failed validation."""

    status_code = 400

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.details = details

    def to_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {"error": self.message}
        if self.details:
            content["details"] = self.details
        return content


class SerializationError(InvalidInput):
    """Responses contain values that cannot be rendered as JSON."""


class EmptyCompletion(MindsetError):
    """The completion service returned no content."""

    status_code = 502

    def __init__(self, message: str = "No response from OpenAI") -> None:
        super().__init__(message)


class UpstreamError(MindsetError):
    """The completion service failed with a structured error response.

    ``status_code`` is the upstream HTTP status, forwarded to the caller
    together with the upstream error type.
    """

    def __init__(
        self,
        status_code: int,
        message: str = "OpenAI API error",
        error_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type

    def to_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {"error": self.message}
        if self.error_type is not None:
            content["type"] = self.error_type
        return content


class UnknownError(MindsetError):
    """Unexpected failure while producing an analysis."""

    status_code = 500

    def to_content(self) -> dict[str, Any]:
        return {"error": "Internal Server Error", "message": self.message}


class ReportRenderError(MindsetError):
    """The PDF report could not be rendered."""

    status_code = 500

    def to_content(self) -> dict[str, Any]:
        return {"error": "Report generation failed", "message": self.message}

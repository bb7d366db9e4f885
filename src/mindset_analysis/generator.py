"""Text generation backends for the analysis endpoint.

``TextGenerator`` is the contract the analyzer depends on; the SDK ships
one implementation, ``OpenAIGenerator``, which sends a single
chat-completion request per prompt.  Tests substitute their own
generator or a fake OpenAI client.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from openai import APIStatusError, AsyncOpenAI

from mindset_analysis.constants import DEFAULT_MODEL
from mindset_analysis.errors import UnknownError, UpstreamError

logger = logging.getLogger(__name__)


class TextGenerator(ABC):
    """Interface for a one-shot text completion service."""

    @abstractmethod
    async def complete(self, prompt: str) -> str | None:
        """Return the generated text for ``prompt``.

        Returns ``None`` when the service answered without usable content.
        Raises ``UpstreamError`` when the service rejected the request.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources held by the generator."""


def build_openai_client(
    api_key: str | None,
    base_url: str | None = None,
) -> AsyncOpenAI | None:
    """Create the async OpenAI client, or ``None`` without a credential."""
    if not api_key:
        logger.warning("OPENAI_API_KEY is not set; analysis requests will fail")
        return None
    client_kwargs: dict[str, Any] = {"api_key": api_key}
    if base_url:
        client_kwargs["base_url"] = base_url
    client = AsyncOpenAI(**client_kwargs)
    logger.info("OpenAI client initialized base_url=%s", client.base_url)
    return client


def _upstream_error_fields(body: object) -> tuple[str | None, str | None]:
    """Pull ``(message, type)`` out of an OpenAI error payload.

    The SDK usually unwraps the ``error`` envelope already; both shapes
    are accepted.
    """
    if not isinstance(body, Mapping):
        return None, None
    inner = body.get("error")
    if isinstance(inner, Mapping):
        body = inner
    return body.get("message"), body.get("type")


class OpenAIGenerator(TextGenerator):
    """Chat-completion backed generator.

    Args:
        client: configured ``AsyncOpenAI`` client; ``None`` means no
            credential was configured and every call fails.
        model: chat model identifier.
    """

    def __init__(self, client: AsyncOpenAI | None, model: str = DEFAULT_MODEL) -> None:
        self._client = client
        self._model = model

    async def complete(self, prompt: str) -> str | None:
        if self._client is None:
            raise UnknownError("OPENAI_API_KEY is not configured")

        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIStatusError as exc:
            message, error_type = _upstream_error_fields(exc.body)
            raise UpstreamError(
                exc.status_code,
                message or "OpenAI API error",
                error_type or getattr(exc, "type", None),
            ) from exc

        choices = completion.choices or []
        if not choices:
            return None
        message = choices[0].message
        if message is None:
            return None
        return message.content

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()

"""MindsetAnalyzer and OpenAIGenerator tests with fake backends.

Test scenarios:
  - Success: completion text returned verbatim as AnalysisResult
  - Empty / missing content → EmptyCompletion (502)
  - Non-mapping responses → InvalidInput, generator never called
  - UpstreamError propagates unchanged
  - Any other exception → UnknownError (500) carrying the message
  - OpenAIGenerator request shape, empty choices, 429 translation,
    missing credential
"""

import httpx
import pytest

from mindset_analysis.analyzer import MindsetAnalyzer
from mindset_analysis.errors import (
    EmptyCompletion,
    InvalidInput,
    UnknownError,
    UpstreamError,
)
from mindset_analysis.generator import OpenAIGenerator

from helpers.fakes import (
    RaisingGenerator,
    StaticGenerator,
    completion,
    fake_openai_client,
    rate_limit_error,
)


# =====================================================================
# Tests: MindsetAnalyzer
# =====================================================================


class TestAnalyzeSuccess:
    """Happy path through prompt rendering and completion."""

    @pytest.mark.asyncio
    async def test_returns_completion_verbatim(self, sample_responses):
        gen = StaticGenerator("MINDSET SCORE\n82 out of 100")
        result = await MindsetAnalyzer(gen).analyze(sample_responses)
        assert result.result == "MINDSET SCORE\n82 out of 100", "Text should be unmodified"

    @pytest.mark.asyncio
    async def test_prompt_contains_responses(self, sample_responses):
        """The generator receives the rendered prompt, not the raw mapping."""
        gen = StaticGenerator()
        await MindsetAnalyzer(gen).analyze(sample_responses)
        assert len(gen.prompts) == 1, "Exactly one completion call expected"
        assert "q2_hours_per_week" in gen.prompts[0]


class TestAnalyzeFailures:
    """Error translation at the analyzer boundary."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, ""])
    async def test_empty_completion(self, content):
        with pytest.raises(EmptyCompletion) as exc_info:
            await MindsetAnalyzer(StaticGenerator(content)).analyze({"q1": "a"})
        assert exc_info.value.status_code == 502
        assert exc_info.value.to_content() == {"error": "No response from OpenAI"}

    @pytest.mark.asyncio
    async def test_whitespace_content_passed_through(self):
        """Only absent or empty content counts as an empty completion."""
        result = await MindsetAnalyzer(StaticGenerator(" \n")).analyze({"q1": "a"})
        assert result.result == " \n"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("responses", [None, "text", 42, ["a", "b"]])
    async def test_invalid_input_skips_generator(self, responses):
        gen = StaticGenerator()
        with pytest.raises(InvalidInput):
            await MindsetAnalyzer(gen).analyze(responses)
        assert gen.prompts == [], "Generator must not be called on invalid input"

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self):
        upstream = UpstreamError(429, "rate limited", "rate_limit")
        with pytest.raises(UpstreamError) as exc_info:
            await MindsetAnalyzer(RaisingGenerator(upstream)).analyze({"q1": "a"})
        assert exc_info.value is upstream, "UpstreamError should not be rewrapped"

    def test_upstream_content_omits_missing_type(self):
        """Upstream errors without a type serialize only the message."""
        assert UpstreamError(500, "server exploded").to_content() == {"error": "server exploded"}

    @pytest.mark.asyncio
    async def test_other_errors_become_unknown(self):
        gen = RaisingGenerator(ConnectionError("connection reset"))
        with pytest.raises(UnknownError) as exc_info:
            await MindsetAnalyzer(gen).analyze({"q1": "a"})
        assert exc_info.value.to_content() == {
            "error": "Internal Server Error",
            "message": "connection reset",
        }


# =====================================================================
# Tests: OpenAIGenerator
# =====================================================================


class TestOpenAIGenerator:
    """Chat-completion backend against a fake OpenAI client."""

    @pytest.mark.asyncio
    async def test_sends_single_user_message(self):
        client = fake_openai_client(result=completion("ok"))
        gen = OpenAIGenerator(client, model="gpt-4o-mini")
        text = await gen.complete("PROMPT")

        assert text == "ok"
        client.chat.completions.create.assert_awaited_once_with(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "PROMPT"}],
        )

    @pytest.mark.asyncio
    async def test_no_choices_returns_none(self):
        client = fake_openai_client(result=completion(None))
        client.chat.completions.create.return_value.choices = []
        assert await OpenAIGenerator(client).complete("PROMPT") is None

    @pytest.mark.asyncio
    async def test_missing_content_returns_none(self):
        client = fake_openai_client(result=completion(None))
        assert await OpenAIGenerator(client).complete("PROMPT") is None

    @pytest.mark.asyncio
    async def test_rate_limit_translated(self):
        """429 from the API keeps its status, message and type."""
        client = fake_openai_client(side_effect=rate_limit_error())
        with pytest.raises(UpstreamError) as exc_info:
            await OpenAIGenerator(client).complete("PROMPT")

        err = exc_info.value
        assert err.status_code == 429
        assert err.to_content() == {"error": "rate limited", "type": "rate_limit"}

    @pytest.mark.asyncio
    async def test_connection_error_not_translated(self):
        """Transport failures carry no status; the analyzer handles them."""
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        client = fake_openai_client(side_effect=httpx.ConnectError("down", request=request))
        with pytest.raises(httpx.ConnectError):
            await OpenAIGenerator(client).complete("PROMPT")

    @pytest.mark.asyncio
    async def test_missing_credential_fails(self):
        with pytest.raises(UnknownError, match="OPENAI_API_KEY"):
            await OpenAIGenerator(None).complete("PROMPT")

    @pytest.mark.asyncio
    async def test_aclose_closes_client(self):
        client = fake_openai_client(result=completion("ok"))
        await OpenAIGenerator(client).aclose()
        client.close.assert_awaited_once()

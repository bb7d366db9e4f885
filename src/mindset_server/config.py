"""Server configuration — reads settings from environment variables.

All settings have sensible defaults for local development.  In production
the values are typically overridden via env vars or a ``.env`` file, which
is loaded without overriding variables that are already set.

Settings are built once at startup and passed to components through
``app.state``; nothing else in the service reads the environment.
"""

import os
from dataclasses import dataclass, field

from dotenv import find_dotenv, load_dotenv

from mindset_analysis.constants import DEFAULT_MODEL

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ServerSettings:
    """Immutable server configuration read from environment at startup."""

    # Network
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS — comma-separated origins, or "*" for wide-open mode
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    # OpenAI — a missing key makes every analysis request fail upstream
    openai_api_key: str | None = field(default=None, repr=False)
    openai_model: str = DEFAULT_MODEL
    openai_base_url: str | None = None

    # Deflate PDF page streams
    report_page_compression: bool = True


def load_settings() -> ServerSettings:
    """Build settings from ``.env`` and ``SERVER_*`` / ``OPENAI_*`` variables."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    raw_origins = os.getenv("SERVER_CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

    return ServerSettings(
        host=os.getenv("SERVER_HOST", "0.0.0.0"),
        port=int(os.getenv("SERVER_PORT") or os.getenv("PORT") or "5000"),
        cors_origins=origins,
        log_level=os.getenv("SERVER_LOG_LEVEL", "INFO").upper(),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        report_page_compression=(
            os.getenv("REPORT_PAGE_COMPRESSION", "true").strip().lower() in _TRUE_VALUES
        ),
    )

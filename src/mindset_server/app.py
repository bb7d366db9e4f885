"""Application factory and CLI entry point.

``create_app()`` builds the FastAPI application with:
  - The analyzer (OpenAI-backed unless a generator is injected) and the
    PDF renderer stashed on ``app.state``
  - Lifespan handler that closes the completion client on shutdown
  - CORS middleware
  - Global exception handlers (SDK errors, schema validation, catch-all)
  - All API routes mounted under ``/api``
  - A ``/health`` endpoint for readiness probes

The ``cli()`` function is the ``mindset-server`` console-script entry point.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from mindset_analysis.analyzer import MindsetAnalyzer
from mindset_analysis.errors import MindsetError
from mindset_analysis.generator import OpenAIGenerator, TextGenerator, build_openai_client
from mindset_analysis.report import ReportRenderer

from mindset_server.config import ServerSettings, load_settings
from mindset_server.errors import (
    generic_error_handler,
    mindset_error_handler,
    validation_error_handler,
)
from mindset_server.routes import register_routes

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Lifespan — runs once at startup/shutdown
# ------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log readiness at startup; release the completion client on shutdown."""
    settings: ServerSettings = app.state.settings
    logger.info(
        "Mindset server ready (model=%s, openai_configured=%s)",
        settings.openai_model,
        bool(settings.openai_api_key),
    )

    yield

    # --- Shutdown ---
    await app.state.generator.aclose()
    logger.info("Completion client closed")


# ------------------------------------------------------------------
# Factory
# ------------------------------------------------------------------

def create_app(
    settings: ServerSettings | None = None,
    generator: TextGenerator | None = None,
) -> FastAPI:
    """Build and return the configured FastAPI application.

    Args:
        settings: configuration; read from the environment when omitted
        generator: completion backend; defaults to ``OpenAIGenerator``
            built from ``settings``
    """
    if settings is None:
        settings = load_settings()

    # --- Configure logging ---
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="Mindset Report Server",
        description="Business mindset analysis and PDF report API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # --- Components ---
    if generator is None:
        client = build_openai_client(settings.openai_api_key, settings.openai_base_url)
        generator = OpenAIGenerator(client, model=settings.openai_model)

    app.state.settings = settings
    app.state.generator = generator
    app.state.analyzer = MindsetAnalyzer(generator)
    app.state.renderer = ReportRenderer(page_compression=settings.report_page_compression)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Exception handlers ---
    app.add_exception_handler(MindsetError, mindset_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # --- Health check (outside /api prefix) ---
    @app.get("/health")
    async def health() -> dict:
        """Readiness probe."""
        return {"status": "ok"}

    # --- Mount all API routes ---
    register_routes(app)

    return app


# ------------------------------------------------------------------
# Module-level ASGI export (for uvicorn mindset_server.app:app)
# ------------------------------------------------------------------
app = create_app()


# ------------------------------------------------------------------
# CLI entry point
# ------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: ``mindset-server``."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "mindset_server.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )

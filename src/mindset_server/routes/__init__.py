"""Route registration — mounts all routers under ``/api``."""

from fastapi import FastAPI

from mindset_server.routes.mindset import router as mindset_router
from mindset_server.routes.report import router as report_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Include all sub-routers under the API prefix."""
    app.include_router(mindset_router, prefix=API_PREFIX)
    app.include_router(report_router, prefix=API_PREFIX)

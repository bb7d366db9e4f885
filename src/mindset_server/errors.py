"""Global exception handlers — map SDK exceptions to HTTP responses.

Every SDK error carries its own status code and JSON body, so one handler
covers the whole taxonomy.  Schema validation failures are answered with
400 rather than FastAPI's default 422, and anything unexpected becomes a
structured 500.  Each failure is logged before the response goes out.
"""

import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mindset_analysis.errors import InvalidInput, MindsetError

logger = logging.getLogger(__name__)


async def mindset_error_handler(request: Request, exc: MindsetError) -> JSONResponse:
    """Translate an SDK error into its status code and JSON body."""
    if exc.status_code >= 500:
        logger.error("%s [%d] at %s: %s", type(exc).__name__, exc.status_code, request.url, exc.message)
    else:
        logger.warning("%s [%d] at %s: %s", type(exc).__name__, exc.status_code, request.url, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Map request-schema failures to 400 ``{error, details}``."""
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    invalid = InvalidInput("Invalid request body", details=jsonable_encoder(details))
    return await mindset_error_handler(request, invalid)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions — log full traceback, return 500."""
    logger.exception("Unhandled exception at %s", request.url)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"},
    )

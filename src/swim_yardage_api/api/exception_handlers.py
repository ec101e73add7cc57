"""
Exception handlers for the FastAPI application.

Every error leaves the service as `{"error": message}` with optional
`details`, whatever raised it.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from swim_yardage_api.exceptions import MethodNotAllowedError, SwimAnalyzerError

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    message: str,
    details: Dict[str, Any] | None = None,
    headers: Dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: Dict[str, Any] = {"error": message}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def swim_analyzer_error_handler(request: Request, exc: SwimAnalyzerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (404, 405) in the same shape as application errors."""
    if exc.status_code == 405:
        return create_error_response(405, MethodNotAllowedError().message, headers=exc.headers)
    return create_error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log and answer 500 with the error message."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return create_error_response(500, f"Server error: {exc}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SwimAnalyzerError, swim_analyzer_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

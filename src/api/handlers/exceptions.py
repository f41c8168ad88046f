from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.middleware.cors import CORS_HEADERS
from core.exceptions import MiniBlogError, PersistenceError, map_exception_to_status
from schemas.responses import ErrorResponse

if TYPE_CHECKING:  # pragma: no cover
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump(), headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "invalid value")
    return f"Invalid request body: {loc}: {msg}" if loc else f"Invalid request body: {msg}"


def register_exception_handlers(app: FastAPI) -> None:
    """Register application-wide exception handlers."""

    @app.exception_handler(MiniBlogError)
    async def miniblog_exception_handler(request: Request, exc: MiniBlogError) -> JSONResponse:  # noqa: D401
        status_code = map_exception_to_status(exc)
        # Persistence failures were already logged where they were raised
        if not isinstance(exc, PersistenceError):
            logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
        return error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: D401
        message = _describe_validation_error(exc)
        logger.info("%s %s -> 400: %s", request.method, request.url.path, message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        # Rendered by ServerErrorMiddleware, outside the CORS middleware
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or exc.__class__.__name__,
            headers=CORS_HEADERS,
        )

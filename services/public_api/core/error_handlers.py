"""Centralized exception handlers for the public API layer."""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from public_api.core.exceptions import DownstreamServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _describe_location(location) -> str:
    if not location:
        return "Invalid request"
    if location[0] == "query" and len(location) > 1:
        return f"Invalid {location[1]} param"
    return "Invalid body request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that return a normalized ``{"error": ...}`` payload."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):  # type: ignore[override]
        detail = exc.detail if isinstance(exc.detail, str) else INTERNAL_ERROR_MESSAGE
        return JSONResponse(status_code=exc.status_code, content={"error": detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        errors = exc.errors()
        message = _describe_location(errors[0].get("loc", ())) if errors else "Invalid request"
        logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(DownstreamServiceError)
    async def downstream_exception_handler(
        request: Request, exc: DownstreamServiceError
    ) -> JSONResponse:  # type: ignore[override]
        logger.error(
            "%s %s failed on a downstream call: %s (%s)",
            request.method,
            request.url.path,
            exc,
            type(exc).__name__,
        )
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


__all__ = ["register_exception_handlers", "INTERNAL_ERROR_MESSAGE"]

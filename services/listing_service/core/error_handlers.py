"""Centralized exception handlers for the listing service."""
from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

PATH_PARAM_MESSAGES: Dict[str, str] = {
    "listing_id": "Invalid listing ID",
}


def _describe_location(location: Sequence[Any]) -> str:
    """Map the location of the first invalid input to a short client message."""
    if not location:
        return "Invalid request"
    source = location[0]
    name = str(location[1]) if len(location) > 1 else ""
    if source == "query":
        return f"Invalid {name} param"
    if source == "path":
        return PATH_PARAM_MESSAGES.get(name, f"Invalid {name}")
    return "Invalid body request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that return a normalized ``{"error": ...}`` payload."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):  # type: ignore[override]
        detail = exc.detail if isinstance(exc.detail, str) else INTERNAL_ERROR_MESSAGE
        response = JSONResponse(status_code=exc.status_code, content={"error": detail})

        if exc.headers:
            for key, value in exc.headers.items():
                response.headers[key] = value

        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        errors = exc.errors()
        message = _describe_location(errors[0].get("loc", ())) if errors else "Invalid request"
        logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


__all__ = ["register_exception_handlers", "INTERNAL_ERROR_MESSAGE"]

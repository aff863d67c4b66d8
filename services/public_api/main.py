"""FastAPI application entry point for the public API layer."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from public_api.api import v1_router
from public_api.core.config import settings
from public_api.core.error_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = httpx.Client(timeout=settings.DOWNSTREAM_SERVICE_TIMEOUT)
    try:
        yield
    finally:
        app.state.http_client.close()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

register_exception_handlers(app)

app.include_router(v1_router)

__all__ = ["app"]

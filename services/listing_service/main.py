"""Entry point for the Listing service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from listing_service.api import v1_router
from listing_service.core.config import settings
from listing_service.core.database import Base, engine
from listing_service.core.error_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        engine.dispose()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

register_exception_handlers(app)

app.include_router(v1_router)


__all__ = ["app"]

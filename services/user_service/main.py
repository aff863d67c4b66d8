"""Entry point for the User FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from user_service.api import v1_router
from user_service.core.config import settings
from user_service.core.database import Base, engine
from user_service.core.error_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create the users table on startup when it does not exist yet.
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        engine.dispose()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

register_exception_handlers(app)

app.include_router(v1_router)


__all__ = ["app"]

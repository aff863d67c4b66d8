"""Shared dependencies for the user service."""

from typing import Generator

from user_service.core.database import SessionLocal


def get_db() -> Generator:
    """Provide a database session scoped to a single request."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = ["get_db"]

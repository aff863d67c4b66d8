"""Core utilities for the user service."""

from .config import settings
from .database import Base, SessionLocal, engine

__all__ = ["settings", "Base", "SessionLocal", "engine"]

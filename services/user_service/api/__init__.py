"""API package for the user service."""

from .v1 import router as v1_router

__all__ = ["v1_router"]

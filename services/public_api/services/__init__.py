"""Service layer for the public API."""

from .public_service import PublicApiService

__all__ = ["PublicApiService"]

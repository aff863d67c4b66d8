"""Core utilities for the public API layer."""

from .config import settings
from .exceptions import DownstreamServiceError, ServiceCallError, ServiceResultError

__all__ = [
    "settings",
    "DownstreamServiceError",
    "ServiceCallError",
    "ServiceResultError",
]

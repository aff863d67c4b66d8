"""Service layer for the user service."""

from .user_service import UserService

__all__ = ["UserService"]

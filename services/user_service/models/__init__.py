"""Database models for the user service."""

from user_service.models.user import User

__all__ = ["User"]

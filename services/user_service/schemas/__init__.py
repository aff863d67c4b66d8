"""Schemas exposed by the user service."""

from user_service.schemas.user import (
    UserCreate,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
)

__all__ = [
    "UserCreate",
    "UserEnvelope",
    "UserListEnvelope",
    "UserResponse",
]

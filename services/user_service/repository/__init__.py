"""Repository helpers for the user service."""

from .user_repository import (
    UserRepositoryError,
    create_user,
    get_user,
    list_users,
)

__all__ = [
    "UserRepositoryError",
    "create_user",
    "get_user",
    "list_users",
]

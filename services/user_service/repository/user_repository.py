"""Database helpers for user persistence."""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_service.core.database import MAX_SQL_INTEGER
from user_service.models import User


class UserRepositoryError(RuntimeError):
    """Raised when the users table cannot be read or written."""


def list_users(db: Session, *, page_num: int, page_size: int) -> List[User]:
    offset = (page_num - 1) * page_size
    if offset > MAX_SQL_INTEGER:
        # No table can hold that many rows, so the window is past the end.
        return []
    try:
        return (
            db.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .offset(offset)
            .limit(page_size)
            .all()
        )
    except SQLAlchemyError as exc:
        raise UserRepositoryError("Failed to list users") from exc


def get_user(db: Session, user_id: int) -> Optional[User]:
    try:
        return db.get(User, user_id)
    except SQLAlchemyError as exc:
        raise UserRepositoryError(f"Failed to fetch user {user_id}") from exc


def create_user(db: Session, user_data: Dict[str, object]) -> User:
    user = User(**user_data)
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as exc:
        db.rollback()
        raise UserRepositoryError("Failed to persist user") from exc
    return user


__all__ = [
    "UserRepositoryError",
    "list_users",
    "get_user",
    "create_user",
]

"""Business logic for managing users."""

from __future__ import annotations

import logging
import time
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from user_service.core.error_handlers import INTERNAL_ERROR_MESSAGE
from user_service.models import User
from user_service.repository import user_repository
from user_service.schemas import UserCreate

logger = logging.getLogger(__name__)


def epoch_micros() -> int:
    return time.time_ns() // 1000


def _internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_MESSAGE,
    )


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def list_users(self, *, page_num: int, page_size: int) -> List[User]:
        try:
            return user_repository.list_users(
                self.db, page_num=page_num, page_size=page_size
            )
        except user_repository.UserRepositoryError as exc:
            logger.exception("Listing users failed (page_num=%s, page_size=%s)", page_num, page_size)
            raise _internal_error() from exc

    def get_user(self, user_id: int) -> User:
        try:
            user = user_repository.get_user(self.db, user_id)
        except user_repository.UserRepositoryError as exc:
            logger.exception("Fetching user %s failed", user_id)
            raise _internal_error() from exc

        if user is None:
            # A missing user is reported as an internal error, not a 404.
            logger.warning("User %s not found", user_id)
            raise _internal_error()
        return user

    def create_user(self, payload: UserCreate) -> User:
        now = epoch_micros()
        user_data = {"name": payload.name, "created_at": now, "updated_at": now}
        try:
            return user_repository.create_user(self.db, user_data)
        except user_repository.UserRepositoryError as exc:
            logger.exception("Creating user %r failed", payload.name)
            raise _internal_error() from exc


__all__ = ["UserService", "epoch_micros"]

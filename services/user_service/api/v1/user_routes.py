"""API routes for user records."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from user_service.core.database import MAX_SQL_INTEGER
from user_service.dependencies import get_db
from user_service.schemas import (
    UserCreate,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
)
from user_service.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListEnvelope)
def list_users(
    page_num: int = Query(1, ge=1, le=MAX_SQL_INTEGER),
    page_size: int = Query(10, ge=1, le=MAX_SQL_INTEGER),
    db: Session = Depends(get_db),
) -> UserListEnvelope:
    service = UserService(db)
    users = service.list_users(page_num=page_num, page_size=page_size)
    return UserListEnvelope(users=[UserResponse.model_validate(user) for user in users])


@router.get("/{user_id}", response_model=UserEnvelope)
def get_user(
    user_id: int = Path(..., ge=1, le=MAX_SQL_INTEGER),
    db: Session = Depends(get_db),
) -> UserEnvelope:
    service = UserService(db)
    return UserEnvelope(user=UserResponse.model_validate(service.get_user(user_id)))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserEnvelope,
)
def create_user(payload: UserCreate, db: Session = Depends(get_db)) -> UserEnvelope:
    service = UserService(db)
    return UserEnvelope(user=UserResponse.model_validate(service.create_user(payload)))


__all__ = ["router"]

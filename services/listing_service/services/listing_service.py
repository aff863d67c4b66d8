"""Business logic for managing listings."""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from listing_service.core.database import MAX_SQL_INTEGER
from listing_service.core.error_handlers import INTERNAL_ERROR_MESSAGE
from listing_service.models import Listing
from listing_service.repository import listing_repository
from listing_service.schemas import ListingCreate

logger = logging.getLogger(__name__)


def parse_user_filter(raw: Optional[str]) -> Optional[int]:
    """Turn the ``user_id`` query value into a filter; blank means no filter."""
    if raw is None or not raw.strip():
        return None
    try:
        user_id = int(raw)
    except ValueError:
        user_id = None
    if user_id is None or abs(user_id) > MAX_SQL_INTEGER:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid user_id param",
        )
    return user_id


class ListingService:
    def __init__(self, db: Session):
        self.db = db

    def list_listings(
        self,
        *,
        page_num: int,
        page_size: int,
        user_id: Optional[int] = None,
    ) -> List[Listing]:
        try:
            return listing_repository.list_listings(
                self.db, page_num=page_num, page_size=page_size, user_id=user_id
            )
        except listing_repository.ListingRepositoryError as exc:
            logger.exception(
                "Listing listings failed (page_num=%s, page_size=%s, user_id=%s)",
                page_num,
                page_size,
                user_id,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_MESSAGE,
            ) from exc

    def get_listing(self, listing_id: int) -> Listing:
        try:
            listing = listing_repository.get_listing(self.db, listing_id)
        except listing_repository.ListingRepositoryError as exc:
            logger.exception("Fetching listing %s failed", listing_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_MESSAGE,
            ) from exc

        if listing is None:
            logger.warning("Listing %s not found", listing_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_MESSAGE,
            )
        return listing

    def create_listing(self, payload: ListingCreate) -> Listing:
        now = time.time_ns() // 1000
        listing_data = payload.model_dump()
        listing_data.update(created_at=now, updated_at=now)
        try:
            return listing_repository.create_listing(self.db, listing_data)
        except listing_repository.ListingRepositoryError as exc:
            logger.exception("Creating listing for user %s failed", payload.user_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_MESSAGE,
            ) from exc


__all__ = ["ListingService", "parse_user_filter"]

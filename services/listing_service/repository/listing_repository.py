"""Database helpers for listing persistence."""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from listing_service.core.database import MAX_SQL_INTEGER
from listing_service.models import Listing


class ListingRepositoryError(RuntimeError):
    """Raised when the listings table cannot be read or written."""


def list_listings(
    db: Session,
    *,
    page_num: int,
    page_size: int,
    user_id: Optional[int] = None,
) -> List[Listing]:
    query = db.query(Listing)

    if user_id is not None:
        query = query.filter(Listing.user_id == user_id)

    offset = (page_num - 1) * page_size
    if offset > MAX_SQL_INTEGER:
        return []
    try:
        return (
            query.order_by(Listing.created_at.desc(), Listing.id.desc())
            .offset(offset)
            .limit(page_size)
            .all()
        )
    except SQLAlchemyError as exc:
        raise ListingRepositoryError("Failed to list listings") from exc


def get_listing(db: Session, listing_id: int) -> Optional[Listing]:
    try:
        return db.get(Listing, listing_id)
    except SQLAlchemyError as exc:
        raise ListingRepositoryError(f"Failed to fetch listing {listing_id}") from exc


def create_listing(db: Session, listing_data: Dict[str, object]) -> Listing:
    listing = Listing(**listing_data)
    try:
        db.add(listing)
        db.commit()
        db.refresh(listing)
    except SQLAlchemyError as exc:
        db.rollback()
        raise ListingRepositoryError("Failed to persist listing") from exc
    return listing


__all__ = [
    "ListingRepositoryError",
    "list_listings",
    "get_listing",
    "create_listing",
]

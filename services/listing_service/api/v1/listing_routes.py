"""API routes for listing records."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from listing_service.core.database import MAX_SQL_INTEGER
from listing_service.dependencies import get_db
from listing_service.schemas import (
    ListingCreate,
    ListingEnvelope,
    ListingListEnvelope,
    ListingResponse,
)
from listing_service.services import ListingService, parse_user_filter

router = APIRouter(prefix="/listings", tags=["listings"])


@router.get("", response_model=ListingListEnvelope)
def list_listings(
    page_num: int = Query(1, ge=1, le=MAX_SQL_INTEGER),
    page_size: int = Query(10, ge=1, le=MAX_SQL_INTEGER),
    user_id: Optional[str] = None,
    db: Session = Depends(get_db),
) -> ListingListEnvelope:
    owner_filter = parse_user_filter(user_id)
    service = ListingService(db)
    listings = service.list_listings(
        page_num=page_num, page_size=page_size, user_id=owner_filter
    )
    return ListingListEnvelope(
        listings=[ListingResponse.model_validate(listing) for listing in listings]
    )


@router.get("/{listing_id}", response_model=ListingEnvelope)
def get_listing(
    listing_id: int = Path(..., ge=1, le=MAX_SQL_INTEGER),
    db: Session = Depends(get_db),
) -> ListingEnvelope:
    service = ListingService(db)
    listing = service.get_listing(listing_id)
    return ListingEnvelope(listing=ListingResponse.model_validate(listing))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ListingEnvelope,
)
def create_listing(payload: ListingCreate, db: Session = Depends(get_db)) -> ListingEnvelope:
    service = ListingService(db)
    listing = service.create_listing(payload)
    return ListingEnvelope(listing=ListingResponse.model_validate(listing))


__all__ = ["router"]

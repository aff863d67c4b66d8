"""Pydantic models for listings as seen by the public API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from public_api.schemas.user import UserRecord

# Integer range the store services accept.
MAX_INT64 = 2**63 - 1


class ListingCreate(BaseModel):
    user_id: int = Field(..., ge=-MAX_INT64, le=MAX_INT64)
    listing_type: str
    price: int = Field(..., ge=-MAX_INT64, le=MAX_INT64)


class ListingRecord(ListingCreate):
    id: int
    created_at: int
    updated_at: int


class AggregatedListing(ListingRecord):
    """A listing with its owner resolved from the user service."""

    user: UserRecord


class ListingPage(BaseModel):
    """Body returned by the listing service for ``GET /listings``."""

    result: bool = False
    listings: List[ListingRecord] = Field(default_factory=list)


class ListingEnvelope(BaseModel):
    """Body returned by the listing service for ``POST /listings``."""

    result: bool = False
    listing: Optional[ListingRecord] = None


class AggregatedListingsResponse(BaseModel):
    result: bool = True
    listings: List[AggregatedListing]


class CreatedListingResponse(BaseModel):
    listing: ListingRecord


__all__ = [
    "MAX_INT64",
    "ListingCreate",
    "ListingRecord",
    "AggregatedListing",
    "ListingPage",
    "ListingEnvelope",
    "AggregatedListingsResponse",
    "CreatedListingResponse",
]

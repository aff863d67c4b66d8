"""Schemas exposed by the listing service."""

from listing_service.schemas.listing import (
    ListingCreate,
    ListingEnvelope,
    ListingListEnvelope,
    ListingResponse,
)

__all__ = [
    "ListingCreate",
    "ListingEnvelope",
    "ListingListEnvelope",
    "ListingResponse",
]

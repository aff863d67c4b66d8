"""Schemas exposed by the public API layer."""

from public_api.schemas.listing import (
    MAX_INT64,
    AggregatedListing,
    AggregatedListingsResponse,
    CreatedListingResponse,
    ListingCreate,
    ListingEnvelope,
    ListingPage,
    ListingRecord,
)
from public_api.schemas.user import (
    CreatedUserResponse,
    UserCreate,
    UserEnvelope,
    UserRecord,
)

__all__ = [
    "MAX_INT64",
    "AggregatedListing",
    "AggregatedListingsResponse",
    "CreatedListingResponse",
    "CreatedUserResponse",
    "ListingCreate",
    "ListingEnvelope",
    "ListingPage",
    "ListingRecord",
    "UserCreate",
    "UserEnvelope",
    "UserRecord",
]

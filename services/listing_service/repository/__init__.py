"""Repository helpers for the listing service."""

from .listing_repository import (
    ListingRepositoryError,
    create_listing,
    get_listing,
    list_listings,
)

__all__ = [
    "ListingRepositoryError",
    "create_listing",
    "get_listing",
    "list_listings",
]

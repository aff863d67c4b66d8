"""Service layer for the listing service."""

from .listing_service import ListingService, parse_user_filter

__all__ = ["ListingService", "parse_user_filter"]

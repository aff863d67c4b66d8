"""Database models for the listing service."""

from listing_service.models.listing import Listing

__all__ = ["Listing"]

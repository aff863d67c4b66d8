"""Clients for the store services behind the public API."""

from .base import ServiceClient
from .listing_client import ListingServiceClient
from .user_client import UserServiceClient

__all__ = ["ServiceClient", "ListingServiceClient", "UserServiceClient"]

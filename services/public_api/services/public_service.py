"""Use cases of the public API: listing aggregation and forwarded creation."""

from __future__ import annotations

import logging
from typing import List, Optional

from public_api.clients import ListingServiceClient, UserServiceClient
from public_api.core.exceptions import ServiceResultError
from public_api.schemas import (
    AggregatedListing,
    ListingCreate,
    ListingRecord,
    UserCreate,
    UserRecord,
)

logger = logging.getLogger(__name__)


class PublicApiService:
    """Composes the listing and user services.

    Every downstream failure surfaces as ``ServiceCallError`` or
    ``ServiceResultError``; nothing is retried or cached.
    """

    def __init__(
        self,
        listing_client: ListingServiceClient,
        user_client: UserServiceClient,
    ) -> None:
        self._listings = listing_client
        self._users = user_client

    def get_aggregated_listings(
        self,
        *,
        page_num: int,
        page_size: int,
        user_id: Optional[str] = None,
    ) -> List[AggregatedListing]:
        """Fetch a page of listings and embed each listing's owner.

        Owners are looked up one at a time in listing order. The first failed
        lookup aborts the whole call, so callers never see a partial page.
        """
        page = self._listings.list_listings(
            page_num=page_num, page_size=page_size, user_id=user_id
        )
        if not page.result:
            logger.error("Listing service reported a failed result for page %s", page_num)
            raise ServiceResultError("failed to get listings")

        aggregated: List[AggregatedListing] = []
        for listing in page.listings:
            owner = self._get_owner(listing)
            aggregated.append(AggregatedListing(**listing.model_dump(), user=owner))

        return aggregated

    def create_listing(self, payload: ListingCreate) -> ListingRecord:
        envelope = self._listings.create_listing(payload.model_dump())
        if not envelope.result or envelope.listing is None:
            logger.error("Listing service reported a failed result creating a listing")
            raise ServiceResultError("failed to create listing")
        return envelope.listing

    def create_user(self, payload: UserCreate) -> UserRecord:
        envelope = self._users.create_user(payload.model_dump())
        if not envelope.result or envelope.user is None:
            logger.error("User service reported a failed result creating a user")
            raise ServiceResultError("failed to create user")
        return envelope.user

    def _get_owner(self, listing: ListingRecord) -> UserRecord:
        envelope = self._users.get_user(listing.user_id)
        if not envelope.result or envelope.user is None:
            logger.error(
                "User service reported a failed result for user %s (listing %s)",
                listing.user_id,
                listing.id,
            )
            raise ServiceResultError("failed to get user")
        return envelope.user


__all__ = ["PublicApiService"]

"""HTTP client for the listing service."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import status

from public_api.clients.base import ServiceClient
from public_api.schemas import ListingEnvelope, ListingPage


class ListingServiceClient(ServiceClient):
    service_name = "listing"

    def list_listings(
        self,
        *,
        page_num: int,
        page_size: int,
        user_id: Optional[str] = None,
    ) -> ListingPage:
        params = {
            "page_num": page_num,
            "page_size": page_size,
            "user_id": user_id or "",
        }
        return self._request(
            "GET",
            "/listings",
            ListingPage,
            expected_status=status.HTTP_200_OK,
            params=params,
        )

    def create_listing(self, payload: Dict[str, Any]) -> ListingEnvelope:
        return self._request(
            "POST",
            "/listings",
            ListingEnvelope,
            expected_status=status.HTTP_201_CREATED,
            payload=payload,
        )


__all__ = ["ListingServiceClient"]

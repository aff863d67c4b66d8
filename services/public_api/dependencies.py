"""Shared dependencies for the public API layer."""

import httpx
from fastapi import Depends, Request

from public_api.clients import ListingServiceClient, UserServiceClient
from public_api.core.config import settings
from public_api.services import PublicApiService


def get_http_client(request: Request) -> httpx.Client:
    """Return the process-wide HTTP client opened by the application lifespan."""

    return request.app.state.http_client


def get_public_api_service(
    http_client: httpx.Client = Depends(get_http_client),
) -> PublicApiService:
    return PublicApiService(
        ListingServiceClient(http_client, base_url=settings.LISTING_SERVICE_URL),
        UserServiceClient(http_client, base_url=settings.USER_SERVICE_URL),
    )


__all__ = ["get_http_client", "get_public_api_service"]

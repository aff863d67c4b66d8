"""Public routes: aggregated listings and forwarded creation."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from public_api.dependencies import get_public_api_service
from public_api.schemas import (
    MAX_INT64,
    AggregatedListingsResponse,
    CreatedListingResponse,
    CreatedUserResponse,
    ListingCreate,
    UserCreate,
)
from public_api.services import PublicApiService

router = APIRouter(prefix="/public-api", tags=["public-api"])


@router.get("/listings", response_model=AggregatedListingsResponse)
def get_listings(
    page_num: int = Query(1, ge=1, le=MAX_INT64),
    page_size: int = Query(10, ge=1, le=MAX_INT64),
    user_id: Optional[str] = None,
    service: PublicApiService = Depends(get_public_api_service),
) -> AggregatedListingsResponse:
    listings = service.get_aggregated_listings(
        page_num=page_num, page_size=page_size, user_id=user_id
    )
    return AggregatedListingsResponse(listings=listings)


@router.post(
    "/listings",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedListingResponse,
)
def create_listing(
    payload: ListingCreate,
    service: PublicApiService = Depends(get_public_api_service),
) -> CreatedListingResponse:
    return CreatedListingResponse(listing=service.create_listing(payload))


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedUserResponse,
)
def create_user(
    payload: UserCreate,
    service: PublicApiService = Depends(get_public_api_service),
) -> CreatedUserResponse:
    return CreatedUserResponse(user=service.create_user(payload))


__all__ = ["router"]

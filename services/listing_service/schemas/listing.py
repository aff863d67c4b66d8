"""Pydantic models for listing resources."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from listing_service.core.database import MAX_SQL_INTEGER


class ListingCreate(BaseModel):
    user_id: int = Field(..., ge=-MAX_SQL_INTEGER, le=MAX_SQL_INTEGER)
    listing_type: str
    price: int = Field(..., ge=-MAX_SQL_INTEGER, le=MAX_SQL_INTEGER)


class ListingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    listing_type: str
    price: int
    created_at: int
    updated_at: int


class ListingEnvelope(BaseModel):
    result: bool = True
    listing: ListingResponse


class ListingListEnvelope(BaseModel):
    result: bool = True
    listings: List[ListingResponse]


__all__ = ["ListingCreate", "ListingResponse", "ListingEnvelope", "ListingListEnvelope"]

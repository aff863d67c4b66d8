"""Pydantic models for users as seen by the public API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        # Forwarded as sent; the user service does its own normalisation.
        if not isinstance(value, str):
            raise ValueError("Value must be a string")
        if not value.strip():
            raise ValueError("Value must not be empty")
        return value


class UserRecord(BaseModel):
    id: int
    name: str
    created_at: int
    updated_at: int


class UserEnvelope(BaseModel):
    """Body returned by the user service for single-user calls."""

    # A body without the flag is treated as a failed result.
    result: bool = False
    user: Optional[UserRecord] = None


class CreatedUserResponse(BaseModel):
    user: UserRecord


__all__ = ["UserCreate", "UserRecord", "UserEnvelope", "CreatedUserResponse"]

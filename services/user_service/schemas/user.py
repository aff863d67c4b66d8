"""Pydantic models for user resources."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_non_empty(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("Value must be a string")
        stripped = value.strip()
        if not stripped:
            raise ValueError("Value must not be empty")
        return stripped


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: int
    updated_at: int


class UserEnvelope(BaseModel):
    result: bool = True
    user: UserResponse


class UserListEnvelope(BaseModel):
    result: bool = True
    users: List[UserResponse]


__all__ = ["UserCreate", "UserResponse", "UserEnvelope", "UserListEnvelope"]

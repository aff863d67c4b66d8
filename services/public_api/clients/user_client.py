"""HTTP client for the user service."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import status

from public_api.clients.base import ServiceClient
from public_api.schemas import UserEnvelope


class UserServiceClient(ServiceClient):
    service_name = "user"

    def get_user(self, user_id: int) -> UserEnvelope:
        return self._request(
            "GET",
            f"/users/{user_id}",
            UserEnvelope,
            expected_status=status.HTTP_200_OK,
        )

    def create_user(self, payload: Dict[str, Any]) -> UserEnvelope:
        return self._request(
            "POST",
            "/users",
            UserEnvelope,
            expected_status=status.HTTP_201_CREATED,
            payload=payload,
        )


__all__ = ["UserServiceClient"]

"""Shared plumbing for the HTTP clients of the store services."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from public_api.core.exceptions import ServiceCallError

logger = logging.getLogger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


class ServiceClient:
    """Sends JSON requests to one downstream service and decodes its envelope.

    Transport faults, unexpected status codes and undecodable bodies all raise
    :class:`ServiceCallError`; the envelope's ``result`` flag is left for the
    caller to check.
    """

    service_name = "downstream"

    def __init__(self, http_client: httpx.Client, *, base_url: str) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    def _request(
        self,
        method: str,
        path: str,
        envelope: Type[EnvelopeT],
        *,
        expected_status: int,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> EnvelopeT:
        url = f"{self._base_url}{path}"

        try:
            response = self._http.request(method, url, params=params, json=payload)
        except httpx.RequestError as exc:
            logger.warning("Failed to reach %s service at %s: %s", self.service_name, url, exc)
            raise ServiceCallError(f"{self.service_name} service unreachable") from exc

        if response.status_code != expected_status:
            logger.warning(
                "%s service returned HTTP %s for %s %s: %s",
                self.service_name,
                response.status_code,
                method,
                url,
                response.text,
            )
            raise ServiceCallError(
                f"{self.service_name} service returned HTTP {response.status_code}"
            )

        try:
            return envelope.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning(
                "Undecodable body from %s service for %s %s: %s",
                self.service_name,
                method,
                url,
                exc,
            )
            raise ServiceCallError(f"{self.service_name} service sent a malformed body") from exc


__all__ = ["ServiceClient"]

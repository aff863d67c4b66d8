"""Configuration settings for the public API layer."""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _to_optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    PROJECT_NAME: str = os.getenv("PUBLIC_API_PROJECT_NAME", "Public API")
    LISTING_SERVICE_URL: str = os.getenv("LISTING_SERVICE_URL", "http://localhost:6000")
    USER_SERVICE_URL: str = os.getenv("USER_SERVICE_URL", "http://localhost:6001")
    # Unset means requests to the stores never time out on our side.
    DOWNSTREAM_SERVICE_TIMEOUT: Optional[float] = _to_optional_float(
        os.getenv("DOWNSTREAM_SERVICE_TIMEOUT")
    )
    HOST: str = os.getenv("PUBLIC_API_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PUBLIC_API_PORT", "6002"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "get_settings", "Settings"]

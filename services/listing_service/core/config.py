"""Configuration settings for the listing service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("LISTING_PROJECT_NAME", "Listing Service")
    DATABASE_URL: str = os.getenv("LISTING_DATABASE_URL", "sqlite:///./listings.db")
    HOST: str = os.getenv("LISTING_SERVICE_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("LISTING_SERVICE_PORT", "6000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]

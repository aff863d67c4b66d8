"""Configuration settings for the user service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("USER_PROJECT_NAME", "User Service")
    DATABASE_URL: str = os.getenv("USER_DATABASE_URL", "sqlite:///./users.db")
    HOST: str = os.getenv("USER_SERVICE_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("USER_SERVICE_PORT", "6001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]

"""Database configuration for the user service."""

from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from user_service.core.config import settings

# Largest value an INTEGER/BIGINT column or LIMIT/OFFSET accepts.
MAX_SQL_INTEGER = 2**63 - 1


def engine_options(database_url: str) -> Dict[str, Any]:
    if database_url.startswith("sqlite"):
        # Sessions are handed to FastAPI worker threads.
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


__all__ = ["engine", "engine_options", "MAX_SQL_INTEGER", "SessionLocal", "Base"]

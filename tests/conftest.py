from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Keep the module-level engines away from files in the working directory.
os.environ.setdefault("USER_DATABASE_URL", "sqlite://")
os.environ.setdefault("LISTING_DATABASE_URL", "sqlite://")

from listing_service.core.database import Base as ListingBase
from listing_service.core.database import engine_options as listing_engine_options
from listing_service.dependencies import get_db as get_listing_db
from listing_service.main import app as listing_app
from user_service.core.database import Base as UserBase
from user_service.core.database import engine_options as user_engine_options
from user_service.dependencies import get_db as get_user_db
from user_service.main import app as user_app


def _session_override(database_url: str, base, options) -> Callable[[], Iterator]:
    engine = create_engine(database_url, **options(database_url))
    base.metadata.create_all(bind=engine)
    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override() -> Iterator:
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    return override


@pytest.fixture()
def user_client(tmp_path: Path) -> Iterator[TestClient]:
    user_app.dependency_overrides[get_user_db] = _session_override(
        f"sqlite:///{tmp_path / 'users.sqlite3'}", UserBase, user_engine_options
    )
    try:
        yield TestClient(user_app)
    finally:
        user_app.dependency_overrides.clear()


@pytest.fixture()
def listing_client(tmp_path: Path) -> Iterator[TestClient]:
    listing_app.dependency_overrides[get_listing_db] = _session_override(
        f"sqlite:///{tmp_path / 'listings.sqlite3'}", ListingBase, listing_engine_options
    )
    try:
        yield TestClient(listing_app)
    finally:
        listing_app.dependency_overrides.clear()

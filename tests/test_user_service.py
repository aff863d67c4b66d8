from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from user_service.dependencies import get_db
from user_service.main import app


def _create(client: TestClient, name: str) -> dict:
    response = client.post("/users", json={"name": name})
    assert response.status_code == 201
    body = response.json()
    assert body["result"] is True
    return body["user"]


def test_create_assigns_id_and_equal_timestamps(user_client: TestClient) -> None:
    user = _create(user_client, "Alice")

    assert user["id"] >= 1
    assert user["name"] == "Alice"
    assert user["created_at"] == user["updated_at"]
    assert user["created_at"] > 1_000_000_000_000_000  # epoch microseconds


def test_created_user_can_be_fetched_by_id(user_client: TestClient) -> None:
    created = _create(user_client, "Bob")

    response = user_client.get(f"/users/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"result": True, "user": created}


def test_ids_increase_monotonically(user_client: TestClient) -> None:
    ids = [_create(user_client, f"user-{index}")["id"] for index in range(3)]

    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_list_is_newest_first_and_windowed(user_client: TestClient) -> None:
    created = [_create(user_client, f"user-{index}") for index in range(5)]
    newest_first = list(reversed(created))

    full = user_client.get("/users", params={"page_num": 1, "page_size": 100}).json()
    assert full["result"] is True
    assert full["users"] == newest_first

    for page_num in (1, 2, 3):
        page = user_client.get("/users", params={"page_num": page_num, "page_size": 2}).json()
        offset = (page_num - 1) * 2
        assert page["users"] == newest_first[offset:offset + 2]


def test_list_defaults_to_first_ten(user_client: TestClient) -> None:
    for index in range(12):
        _create(user_client, f"user-{index}")

    body = user_client.get("/users").json()

    assert len(body["users"]) == 10
    assert body["users"][0]["name"] == "user-11"


def test_list_past_the_end_is_empty(user_client: TestClient) -> None:
    _create(user_client, "Only")

    response = user_client.get("/users", params={"page_num": 5, "page_size": 10})

    assert response.status_code == 200
    assert response.json() == {"result": True, "users": []}


def test_invalid_pagination_params_are_rejected(user_client: TestClient) -> None:
    response = user_client.get("/users", params={"page_num": "abc"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid page_num param"}

    response = user_client.get("/users", params={"page_size": "0"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid page_size param"}


def test_out_of_range_integers_are_rejected(user_client: TestClient) -> None:
    too_big = str(2**63)

    response = user_client.get("/users", params={"page_size": too_big})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid page_size param"}

    response = user_client.get(f"/users/{too_big}")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid user ID"}


def test_window_beyond_integer_range_is_empty(user_client: TestClient) -> None:
    _create(user_client, "Only")

    response = user_client.get("/users", params={"page_num": 2**62, "page_size": 10})

    assert response.status_code == 200
    assert response.json() == {"result": True, "users": []}


def test_invalid_user_id_is_rejected(user_client: TestClient) -> None:
    response = user_client.get("/users/not-a-number")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid user ID"}


def test_missing_user_is_reported_as_internal_error(user_client: TestClient) -> None:
    response = user_client.get("/users/9999")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_malformed_body_is_rejected(user_client: TestClient) -> None:
    for body in ({}, {"name": ""}, {"name": "   "}, {"name": 42}):
        response = user_client.post("/users", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid body request"}


def test_storage_fault_is_opaque(tmp_path: Path) -> None:
    # No tables were created on this database, so every query fails.
    engine = create_engine(
        f"sqlite:///{tmp_path / 'empty.sqlite3'}",
        connect_args={"check_same_thread": False},
    )
    broken_session = sessionmaker(bind=engine)

    def override():
        db = broken_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override
    try:
        client = TestClient(app)
        for response in (
            client.get("/users"),
            client.get("/users/1"),
            client.post("/users", json={"name": "Carol"}),
        ):
            assert response.status_code == 500
            assert response.json() == {"error": "Internal Server Error"}
    finally:
        app.dependency_overrides.clear()

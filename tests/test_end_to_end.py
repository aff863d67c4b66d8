"""The public API wired to the real listing and user services in-process."""

from __future__ import annotations

from typing import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from public_api.core.config import settings
from public_api.dependencies import get_http_client
from public_api.main import app as public_app


@pytest.fixture()
def public_client(
    user_client: TestClient, listing_client: TestClient
) -> Iterator[TestClient]:
    stores = {
        httpx.URL(settings.USER_SERVICE_URL).port: user_client,
        httpx.URL(settings.LISTING_SERVICE_URL).port: listing_client,
    }

    def dispatch(request: httpx.Request) -> httpx.Response:
        store = stores[request.url.port]
        response = store.request(
            request.method,
            request.url.path,
            params=request.url.params,
            content=request.content,
            headers={"content-type": "application/json"},
        )
        return httpx.Response(response.status_code, content=response.content)

    http_client = httpx.Client(transport=httpx.MockTransport(dispatch))
    public_app.dependency_overrides[get_http_client] = lambda: http_client
    try:
        yield TestClient(public_app)
    finally:
        public_app.dependency_overrides.clear()
        http_client.close()


def _create_user(client: TestClient, name: str) -> dict:
    response = client.post("/public-api/users", json={"name": name})
    assert response.status_code == 201
    return response.json()["user"]


def _create_listing(client: TestClient, user_id: int, price: int, listing_type: str = "rent") -> dict:
    response = client.post(
        "/public-api/listings",
        json={"user_id": user_id, "listing_type": listing_type, "price": price},
    )
    assert response.status_code == 201
    return response.json()["listing"]


def test_created_listing_reappears_with_owner(public_client: TestClient) -> None:
    owner = _create_user(public_client, "Alice")
    created = _create_listing(public_client, owner["id"], price=4200, listing_type="sale")

    response = public_client.get("/public-api/listings")

    assert response.status_code == 200
    [listing] = response.json()["listings"]
    assert listing["id"] == created["id"]
    assert listing["price"] == 4200
    assert listing["listing_type"] == "sale"
    assert listing["user"] == owner


def test_pages_through_listings_newest_first(public_client: TestClient) -> None:
    owner = _create_user(public_client, "Bob")
    first = _create_listing(public_client, owner["id"], price=1)
    second = _create_listing(public_client, owner["id"], price=2)
    third = _create_listing(public_client, owner["id"], price=3)

    page_one = public_client.get("/public-api/listings", params={"page_num": 1, "page_size": 2})
    page_two = public_client.get("/public-api/listings", params={"page_num": 2, "page_size": 2})

    assert [item["id"] for item in page_one.json()["listings"]] == [third["id"], second["id"]]
    assert [item["id"] for item in page_two.json()["listings"]] == [first["id"]]


def test_filter_by_owner(public_client: TestClient) -> None:
    alice = _create_user(public_client, "Alice")
    bob = _create_user(public_client, "Bob")
    _create_listing(public_client, alice["id"], price=10)
    bobs = _create_listing(public_client, bob["id"], price=20)

    response = public_client.get("/public-api/listings", params={"user_id": str(bob["id"])})

    assert [item["id"] for item in response.json()["listings"]] == [bobs["id"]]


def test_listing_with_unknown_owner_fails_the_whole_page(public_client: TestClient) -> None:
    owner = _create_user(public_client, "Carol")
    _create_listing(public_client, owner["id"], price=1)
    _create_listing(public_client, 9999, price=2)
    _create_listing(public_client, owner["id"], price=3)

    response = public_client.get("/public-api/listings")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}

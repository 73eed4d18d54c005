"""HTTP tests for the product browse feed."""

import pytest


@pytest.fixture
def feed_catalog(factory):
    category = factory.category("Hardware")
    approved = factory.supplier("Approved Co", status="APPROVED")
    pending = factory.supplier("Pending Co", status="PENDING")
    for index in range(5):
        factory.product(f"Bolt {index}", approved, category, is_sample_available=index % 2 == 0)
    factory.product("Pending Bolt", pending, category)
    factory.product("Retired Bolt", approved, category, is_active=False)
    return category


def test_feed_shows_only_approved_active_products(client, feed_catalog):
    body = client.get("/products/feed").json()
    names = [item["name"] for item in body["products"]]
    assert names == ["Bolt 4", "Bolt 3", "Bolt 2", "Bolt 1", "Bolt 0"]
    assert body["total"] == 5
    assert body["hasMore"] is False
    assert body["pageSize"] == 24


def test_feed_pages(client, feed_catalog):
    body = client.get("/products/feed", params={"page_size": "2"}).json()
    assert len(body["products"]) == 2
    assert body["hasMore"] is True

    body = client.get("/products/feed", params={"page_size": "2", "page": "3"}).json()
    assert [item["name"] for item in body["products"]] == ["Bolt 0"]
    assert body["hasMore"] is False


def test_feed_page_size_is_capped(client, feed_catalog):
    body = client.get("/products/feed", params={"page_size": "500"}).json()
    assert body["pageSize"] == 48


def test_feed_filters(client, feed_catalog):
    body = client.get("/products/feed", params={"sample_available": "true"}).json()
    assert [item["name"] for item in body["products"]] == ["Bolt 4", "Bolt 2", "Bolt 0"]

    body = client.get("/products/feed", params={"q": "bolt 3"}).json()
    assert [item["name"] for item in body["products"]] == ["Bolt 3"]

    body = client.get("/products/feed", params={"category": str(feed_catalog.id + 100)}).json()
    assert body["products"] == []


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_feed_rejects_page_past_database_range(client, feed_catalog):
    response = client.get("/products/feed", params={"page": str(10 ** 19)})
    assert response.status_code == 422


def test_feed_ignores_oversized_category_id(client, feed_catalog):
    body = client.get("/products/feed", params={"category": str(10 ** 20)}).json()
    assert body["total"] == 5

"""Integration tests for admin maintenance endpoints."""

import uuid

import pytest
from tests.factories import SEED_TOKEN


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "shop-admin-mock"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_seed_then_list_shops_and_orders(client):
    response = await client.post("/admin/seed")
    assert response.status_code == 201
    assert response.json() == {"message": "Database seeded successfully"}

    shops = (await client.get("/admin/shops")).json()["shops"]
    assert [shop["access_token"] for shop in shops] == [SEED_TOKEN]

    orders = (await client.get("/admin/orders")).json()["orders"]
    assert sorted(order["external_id"] for order in orders) == ["order-001", "order-002"]
    assert all(len(order["line_items"]) == 1 for order in orders)
    assert all(order["fulfillments"] == [] for order in orders)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_order_by_internal_id(client):
    await client.post("/admin/seed")
    orders = (await client.get("/admin/orders")).json()["orders"]
    order_id = orders[0]["id"]

    response = await client.get(f"/admin/orders/{order_id}")

    assert response.status_code == 200
    assert response.json()["order"]["id"] == order_id


@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_missing_order_returns_null(client):
    response = await client.get(f"/admin/orders/{uuid.uuid4()}")

    assert response.status_code == 200
    assert response.json() == {"order": None}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_order_status_moves_order_out_of_unshipped_list(client):
    await client.post("/admin/seed")
    orders = (await client.get("/admin/orders")).json()["orders"]
    target = next(o for o in orders if o["external_id"] == "order-001")

    response = await client.post(
        f"/admin/orders/{target['id']}/status", json={"fulfillment_status": "shipped"}
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["message"] == "Order status updated"
    assert body["order"]["fulfillment_status"] == "shipped"

    listing = await client.post(
        "/graphql.json", json={"query": "{ orders(first: 10) { edges { node { id } } } }"}
    )
    ids = [edge["node"]["id"] for edge in listing.json()["data"]["orders"]["edges"]]
    assert ids == ["gid://shopify/Order/order-002"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_order_status_validation(client):
    await client.post("/admin/seed")
    orders = (await client.get("/admin/orders")).json()["orders"]

    invalid = await client.post(
        f"/admin/orders/{orders[0]['id']}/status", json={"fulfillment_status": "lost"}
    )
    missing = await client.post(
        f"/admin/orders/{uuid.uuid4()}/status", json={"fulfillment_status": "shipped"}
    )

    assert invalid.status_code == 422
    assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_reset_then_graphql_sees_nothing(client):
    await client.post("/admin/seed")

    response = await client.post("/admin/reset")
    assert response.json() == {"message": "Database reset successfully"}

    assert (await client.get("/admin/shops")).json() == {"shops": []}
    listing = await client.post(
        "/graphql.json", json={"query": "{ orders(first: 10) { edges { node { id } } } }"}
    )
    assert listing.json()["data"]["orders"]["edges"] == []
    missing = await client.post(
        "/graphql.json", json={"query": '{ order(id: "order-001") { id } }'}
    )
    assert missing.json()["data"] == {"order": None}

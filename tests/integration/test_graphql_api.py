"""Integration tests for the GraphQL endpoint."""

import pytest
from services.admin_api_service.models import OrderFulfillmentStatus, ProductVariant
from services.admin_api_service.store import SqlAlchemyStore
from tests.factories import SEED_TOKEN, make_order, make_shop_with_catalog

ORDERS_QUERY = """
query {
  orders(first: 10) {
    edges {
      node {
        id
        name
        email
        fulfillmentStatus
        lineItems { edges { node { id title sku quantity } } }
      }
      cursor
    }
    pageInfo { hasNextPage endCursor }
  }
}
"""

INVENTORY_MUTATION = """
mutation inventorySetQuantities($input: InventorySetQuantitiesInput!) {
  inventorySetQuantities(input: $input) {
    inventoryAdjustmentGroup { id }
    userErrors { field message }
  }
}
"""


# ---------------------------------------------------------------------------
# Request validation
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize("body", [{}, {"query": ""}, {"query": "   "}, {"variables": {}}])
async def test_missing_query_is_bad_request(client, body):
    response = await client.post("/graphql.json", json=body)

    assert response.status_code == 400
    assert response.json()["detail"] == "Query is required"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unsupported_query_returns_error_envelope(client):
    response = await client.post("/graphql.json", json={"query": "{ shop { name } }"})

    assert response.status_code == 200
    assert response.json() == {"data": None, "errors": [{"message": "Unsupported query"}]}


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_orders_lists_only_unshipped(client, db_session):
    shop, _, _ = await make_shop_with_catalog(db_session)
    for minutes in range(3):
        await make_order(db_session, shop, minutes=minutes)
    for minutes in (10, 11):
        await make_order(
            db_session,
            shop,
            minutes=minutes,
            fulfillment_status=OrderFulfillmentStatus.SHIPPED,
        )

    response = await client.post("/graphql.json", json={"query": ORDERS_QUERY})

    assert response.status_code == 200, response.text
    orders = response.json()["data"]["orders"]
    assert len(orders["edges"]) == 3
    assert {edge["node"]["fulfillmentStatus"] for edge in orders["edges"]} == {
        "UNSHIPPED"
    }
    assert orders["pageInfo"]["hasNextPage"] is False


@pytest.mark.asyncio
@pytest.mark.integration
async def test_versioned_path_and_access_token_header(client, db_session):
    await make_shop_with_catalog(db_session, minutes=0)
    other, _, _ = await make_shop_with_catalog(
        db_session, minutes=5, access_token="shpat_other"
    )
    await make_order(db_session, other, external_id="other-order", order_number=2002)

    response = await client.post(
        "/admin/api/2024-01/graphql.json",
        json={"query": ORDERS_QUERY},
        headers={"X-Shopify-Access-Token": "shpat_other"},
    )

    assert response.status_code == 200
    edges = response.json()["data"]["orders"]["edges"]
    assert [edge["node"]["name"] for edge in edges] == ["#2002"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_seeded_order_by_gid(client):
    seed = await client.post("/admin/seed")
    assert seed.status_code == 201

    response = await client.post(
        "/graphql.json",
        json={
            "query": '{ order(id: "gid://shopify/Order/order-001") { id name } }'
        },
        headers={"Authorization": f"Bearer {SEED_TOKEN}"},
    )

    assert response.status_code == 200
    order = response.json()["data"]["order"]
    assert order["id"] == "gid://shopify/Order/order-001"
    assert order["name"] == "#1001"
    assert order["email"] == "customer1@example.com"
    assert order["subtotalPrice"] == "59.98"
    assert order["totalShippingPrice"] == "10.00"
    assert order["totalTax"] == "4.80"
    assert order["totalPrice"] == "74.78"
    assert order["shippingAddress"]["firstName"] == "John"
    assert order["shippingAddress"]["countryCodeV2"] == "US"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_order_not_found(client):
    await client.post("/admin/seed")

    response = await client.post(
        "/graphql.json", json={"query": '{ order(id: "does-not-exist") { id } }'}
    )

    body = response.json()
    assert body["data"] == {"order": None}
    assert body["errors"] == [{"message": "Order not found"}]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_product_variants(client):
    await client.post("/admin/seed")

    response = await client.post(
        "/graphql.json",
        json={"query": "{ productVariants(first: 2) { edges { node { id sku } } } }"},
    )

    page = response.json()["data"]["productVariants"]
    assert len(page["edges"]) == 2
    assert page["pageInfo"]["hasNextPage"] is True
    assert all(
        edge["node"]["id"].startswith("gid://shopify/ProductVariant/")
        for edge in page["edges"]
    )


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_inventory_set_quantities_persists(client, session_factory):
    await client.post("/admin/seed")

    response = await client.post(
        "/graphql.json",
        json={
            "query": INVENTORY_MUTATION,
            "variables": {"variantId": "gid://shopify/ProductVariant/2001", "quantity": 7},
        },
    )

    assert response.status_code == 200
    assert response.json()["data"]["inventorySetQuantities"]["inventoryLevel"] == {
        "quantities": [{"name": "available", "quantity": 7}]
    }

    async with session_factory() as session:
        variant = await SqlAlchemyStore(session).find_one(
            ProductVariant, {"external_id": "2001"}
        )
    assert variant.quantity == 7


@pytest.mark.asyncio
@pytest.mark.integration
async def test_inventory_set_unknown_variant(client):
    await client.post("/admin/seed")

    response = await client.post(
        "/graphql.json",
        json={
            "query": INVENTORY_MUTATION,
            "variables": {"variantId": "gid://shopify/ProductVariant/404", "quantity": 7},
        },
    )

    assert response.json() == {"data": None, "errors": [{"message": "Variant not found"}]}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_fulfillment_create(client):
    await client.post("/admin/seed")

    response = await client.post(
        "/graphql.json",
        json={
            "query": "mutation { fulfillmentCreate(fulfillment: $f) { fulfillment { id } } }",
            "variables": {
                "orderId": "gid://shopify/Order/order-002",
                "trackingNumber": "TRACK-2",
            },
        },
    )

    fulfillment = response.json()["data"]["fulfillmentCreate"]["fulfillment"]
    assert fulfillment["status"] == "SUCCESS"
    assert fulfillment["trackingInfo"] == {"number": "TRACK-2", "url": None}
    assert response.json()["data"]["fulfillmentCreate"]["userErrors"] == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_request_id_is_echoed(client):
    response = await client.post(
        "/graphql.json",
        json={"query": "{ shop { name } }"},
        headers={"X-Request-ID": "req-123"},
    )
    assert response.headers["X-Request-ID"] == "req-123"

"""One handler per supported operation.

Handlers receive the resolved shop (or None), extracted parameters, the
store and the mapper, and return the ``data`` payload. Failures are raised
as ``AdminApiError`` subclasses; the dispatcher turns them into envelopes.
"""

from typing import Optional

from libs.common.logging import get_logger
from services.admin_api_service.errors import NotFoundError
from services.admin_api_service.mapper import ResponseMapper
from services.admin_api_service.models import Order, ProductVariant, Shop
from services.admin_api_service.params import (
    FulfillmentCreateParams,
    InventorySetParams,
    OrderGetParams,
    OrdersListParams,
    VariantsListParams,
)
from services.admin_api_service.store import SqlAlchemyStore

logger = get_logger(__name__)

NEWEST_FIRST = [("created_at", "desc"), ("id", "desc")]
ORDER_RELATIONS = ("line_items", "fulfillments")

# Fulfillments are acknowledged, not stored, so every ack carries this id
ACK_FULFILLMENT_ID = "1"


async def _find_order(
    store: SqlAlchemyStore, shop: Optional[Shop], order_id: Optional[str], *load: str
) -> Optional[Order]:
    if shop is None or not order_id:
        return None
    return await store.find_one(
        Order, {"shop_id": shop.id, "external_id": order_id}, load=load
    )


# ============================================================================
# QUERIES
# ============================================================================


async def list_orders(
    store: SqlAlchemyStore,
    mapper: ResponseMapper,
    shop: Optional[Shop],
    params: OrdersListParams,
) -> dict:
    if shop is None or not params.status_known:
        return {"orders": mapper.orders([], has_next_page=False)}

    filters: dict = {"shop_id": shop.id}
    if params.fulfillment_status is not None:
        filters["fulfillment_status"] = params.fulfillment_status

    total = await store.count(Order, filters)
    rows = await store.find(
        Order, filters, NEWEST_FIRST, params.first, load=ORDER_RELATIONS
    )
    return {"orders": mapper.orders(rows, has_next_page=total > params.first)}


async def get_order(
    store: SqlAlchemyStore,
    mapper: ResponseMapper,
    shop: Optional[Shop],
    params: OrderGetParams,
) -> dict:
    logger.debug("Fetching order %s", params.order_id)
    order = await _find_order(store, shop, params.order_id, *ORDER_RELATIONS)
    if order is None:
        raise NotFoundError("Order not found", field="order")
    return {"order": mapper.order(order)}


async def list_product_variants(
    store: SqlAlchemyStore,
    mapper: ResponseMapper,
    shop: Optional[Shop],
    params: VariantsListParams,
) -> dict:
    if shop is None:
        return {"productVariants": mapper.variants([], has_next_page=False)}

    filters = {"product.shop_id": shop.id}
    total = await store.count(ProductVariant, filters)
    rows = await store.find(
        ProductVariant, filters, NEWEST_FIRST, params.first, load=("product",)
    )
    return {
        "productVariants": mapper.variants(rows, has_next_page=total > params.first)
    }


# ============================================================================
# MUTATIONS
# ============================================================================


async def create_fulfillment(
    store: SqlAlchemyStore,
    mapper: ResponseMapper,
    shop: Optional[Shop],
    params: FulfillmentCreateParams,
) -> dict:
    logger.debug("Creating fulfillment for order %s", params.order_id)
    order = await _find_order(store, shop, params.order_id, "line_items")
    if order is None:
        raise NotFoundError("Order not found")

    return {
        "fulfillmentCreate": {
            "fulfillment": {
                "id": mapper.gid("Fulfillment", ACK_FULFILLMENT_ID),
                "status": "SUCCESS",
                "trackingInfo": {
                    "number": params.tracking_number,
                    "url": params.tracking_url,
                },
                "lineItems": params.line_items,
            },
            "userErrors": [],
        }
    }


async def set_inventory_quantities(
    store: SqlAlchemyStore,
    mapper: ResponseMapper,
    shop: Optional[Shop],
    params: InventorySetParams,
) -> dict:
    variant = None
    if shop is not None and params.variant_id:
        variant = await store.find_one(
            ProductVariant,
            {"product.shop_id": shop.id, "external_id": params.variant_id},
        )
    if variant is None:
        raise NotFoundError("Variant not found")

    if params.quantity is None:
        return {
            "inventorySetQuantities": {
                "inventoryLevel": None,
                "userErrors": [
                    {"field": ["quantity"], "message": "Quantity must be an integer"}
                ],
            }
        }

    variant.quantity = params.quantity
    await store.save(ProductVariant, variant)
    logger.info(
        "Set inventory for variant %s to %s", variant.external_id, params.quantity
    )

    return {
        "inventorySetQuantities": {
            "inventoryLevel": {
                "quantities": [{"name": "available", "quantity": params.quantity}]
            },
            "userErrors": [],
        }
    }

"""Admin API mock models package."""

from services.admin_api_service.models.catalog import Product, ProductVariant, Shop
from services.admin_api_service.models.commerce import (
    Fulfillment,
    Order,
    OrderLineItem,
)
from services.admin_api_service.models.enums import (
    FulfillmentStatus,
    OrderFulfillmentStatus,
    OrderStatus,
)

__all__ = [
    "Fulfillment",
    "FulfillmentStatus",
    "Order",
    "OrderFulfillmentStatus",
    "OrderLineItem",
    "OrderStatus",
    "Product",
    "ProductVariant",
    "Shop",
]

"""
Model factories for creating valid test data.

Every factory produces a valid, insertable SQLAlchemy model instance.
Override any field via kwargs.

Usage:
    shop = ShopFactory.create(access_token="shpat_other")
    db_session.add(shop)
    await db_session.commit()
"""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from libs.common.config import get_settings

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def _uuid() -> uuid.UUID:
    return uuid.uuid4()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def minutes_after_base(minutes: int) -> datetime:
    """Deterministic timestamps so created_at ordering is predictable."""
    return BASE_TIME + timedelta(minutes=minutes)


def _token() -> str:
    return f"shpat_{uuid.uuid4().hex[:16]}"


# ---------------------------------------------------------------------------
# Tenant & catalog
# ---------------------------------------------------------------------------


class ShopFactory:
    @staticmethod
    def create(**overrides):
        from services.admin_api_service.models import Shop

        defaults = {
            "id": _uuid(),
            "shop_name": f"shop-{uuid.uuid4().hex[:6]}.myshopify.com",
            "access_token": _token(),
            "created_at": _now(),
            "updated_at": _now(),
        }
        defaults.update(overrides)
        return Shop(**defaults)


class ProductFactory:
    @staticmethod
    def create(shop_id=None, **overrides):
        from services.admin_api_service.models import Product

        defaults = {
            "id": _uuid(),
            "shop_id": shop_id or _uuid(),
            "external_id": str(uuid.uuid4().int)[:9],
            "title": "Test Product",
            "description": "A product for tests",
            "images": [],
            "created_at": _now(),
            "updated_at": _now(),
        }
        defaults.update(overrides)
        return Product(**defaults)


class VariantFactory:
    @staticmethod
    def create(product_id=None, **overrides):
        from services.admin_api_service.models import ProductVariant

        defaults = {
            "id": _uuid(),
            "product_id": product_id or _uuid(),
            "external_id": str(uuid.uuid4().int)[:6],
            "sku": f"SKU-{uuid.uuid4().hex[:6].upper()}",
            "title": "Default",
            "price": Decimal("19.99"),
            "quantity": 10,
            "created_at": _now(),
            "updated_at": _now(),
        }
        defaults.update(overrides)
        return ProductVariant(**defaults)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class OrderFactory:
    @staticmethod
    def create(shop_id=None, **overrides):
        from services.admin_api_service.models import (
            Order,
            OrderFulfillmentStatus,
            OrderStatus,
        )

        defaults = {
            "id": _uuid(),
            "shop_id": shop_id or _uuid(),
            "external_id": f"order-{uuid.uuid4().hex[:8]}",
            "order_number": 1001,
            "customer_email": "customer@example.com",
            "status": OrderStatus.CONFIRMED,
            "fulfillment_status": OrderFulfillmentStatus.UNSHIPPED,
            "shipping_address": {
                "firstName": "John",
                "lastName": "Doe",
                "address1": "123 Main St",
                "city": "New York",
                "province": "NY",
                "zip": "10001",
                "country": "US",
            },
            "total_price": Decimal("59.98"),
            "metadata_": {},
            "created_at": _now(),
            "updated_at": _now(),
        }
        defaults.update(overrides)
        return Order(**defaults)


class LineItemFactory:
    @staticmethod
    def create(order_id=None, **overrides):
        from services.admin_api_service.models import OrderLineItem

        defaults = {
            "id": _uuid(),
            "order_id": order_id,
            "position": 0,
            "variant_external_id": "1001",
            "title": "Test Product 1 - Red - Small",
            "sku": "PROD-001",
            "quantity": 2,
            "price": Decimal("29.99"),
        }
        defaults.update(overrides)
        return OrderLineItem(**defaults)


class FulfillmentFactory:
    @staticmethod
    def create(order_id=None, **overrides):
        from services.admin_api_service.models import Fulfillment, FulfillmentStatus

        defaults = {
            "id": _uuid(),
            "order_id": order_id,
            "external_id": str(uuid.uuid4().int)[:8],
            "status": FulfillmentStatus.IN_TRANSIT,
            "line_items": [],
            "tracking_number": "1Z999AA10123456784",
            "tracking_url": "https://tracking.example.com/1Z999AA10123456784",
            "shipped_at": _now(),
            "created_at": _now(),
            "updated_at": _now(),
        }
        defaults.update(overrides)
        return Fulfillment(**defaults)


# ---------------------------------------------------------------------------
# Composite helpers
# ---------------------------------------------------------------------------

SEED_TOKEN = get_settings().SEED_ACCESS_TOKEN


async def add_rows(db, *rows):
    """Insert rows and commit."""
    db.add_all(rows)
    await db.commit()
    return rows


async def make_shop_with_catalog(db, *, minutes: int = 0, **shop_overrides):
    """A shop with one product and two variants."""
    shop = ShopFactory.create(created_at=minutes_after_base(minutes), **shop_overrides)
    product = ProductFactory.create(shop_id=shop.id, title="Widget")
    variants = [
        VariantFactory.create(
            product_id=product.id,
            external_id=f"{shop.id.hex[:6]}-1",
            title="Small",
            created_at=minutes_after_base(1),
        ),
        VariantFactory.create(
            product_id=product.id,
            external_id=f"{shop.id.hex[:6]}-2",
            title="Large",
            price=Decimal("24.50"),
            created_at=minutes_after_base(2),
        ),
    ]
    await add_rows(db, shop, product, *variants)
    return shop, product, variants


async def make_order(db, shop, *, minutes: int = 0, line_items=None, **overrides):
    order = OrderFactory.create(
        shop_id=shop.id, created_at=minutes_after_base(minutes), **overrides
    )
    order.line_items = (
        line_items if line_items is not None else [LineItemFactory.create()]
    )
    order.fulfillments = []
    await add_rows(db, order)
    return order

"""Fixture data for the admin API mock.

``seed_test_data`` loads one shop with two products, three variants and two
unshipped orders. ``reset_data`` removes every row, children first.
"""

from decimal import Decimal
from typing import Optional

from libs.common.config import Settings
from libs.common.logging import get_logger
from services.admin_api_service.models import (
    Fulfillment,
    Order,
    OrderFulfillmentStatus,
    OrderLineItem,
    OrderStatus,
    Product,
    ProductVariant,
    Shop,
)
from services.admin_api_service.store import SqlAlchemyStore
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

# Children before parents
RESET_ORDER = (Fulfillment, OrderLineItem, Order, ProductVariant, Product, Shop)


def build_seed_shop(shop_name: str, access_token: str) -> Shop:
    """Build the fixture object graph without touching the database."""
    shop = Shop(shop_name=shop_name, access_token=access_token)

    product1 = Product(
        external_id="123456789",
        title="Test Product 1",
        description="A test product for mock integration",
        images=[],
    )
    product2 = Product(
        external_id="987654321",
        title="Test Product 2",
        description="Another test product",
        images=[],
    )

    variant1 = ProductVariant(
        external_id="1001",
        sku="PROD-001",
        title="Red - Small",
        price=Decimal("29.99"),
        quantity=100,
    )
    variant2 = ProductVariant(
        external_id="1002",
        sku="PROD-002",
        title="Blue - Medium",
        price=Decimal("29.99"),
        quantity=50,
    )
    variant3 = ProductVariant(
        external_id="2001",
        sku="PROD2-001",
        title="Standard",
        price=Decimal("49.99"),
        quantity=75,
    )
    product1.variants = [variant1, variant2]
    product2.variants = [variant3]
    shop.products = [product1, product2]

    order1 = Order(
        external_id="order-001",
        order_number=1001,
        customer_email="customer1@example.com",
        status=OrderStatus.CONFIRMED,
        fulfillment_status=OrderFulfillmentStatus.UNSHIPPED,
        shipping_address={
            "firstName": "John",
            "lastName": "Doe",
            "address1": "123 Main St",
            "city": "New York",
            "province": "NY",
            "zip": "10001",
            "country": "US",
        },
        total_price=Decimal("59.98"),
        metadata_={},
    )
    order1.line_items = [
        OrderLineItem(
            position=0,
            variant_external_id=variant1.external_id,
            title="Test Product 1 - Red - Small",
            sku="PROD-001",
            quantity=2,
            price=Decimal("29.99"),
        )
    ]

    order2 = Order(
        external_id="order-002",
        order_number=1002,
        customer_email="customer2@example.com",
        status=OrderStatus.CONFIRMED,
        fulfillment_status=OrderFulfillmentStatus.UNSHIPPED,
        shipping_address={
            "firstName": "Jane",
            "lastName": "Smith",
            "address1": "456 Oak Ave",
            "city": "Los Angeles",
            "province": "CA",
            "zip": "90001",
            "country": "US",
        },
        total_price=Decimal("49.99"),
        metadata_={},
    )
    order2.line_items = [
        OrderLineItem(
            position=0,
            variant_external_id=variant3.external_id,
            title="Test Product 2 - Standard",
            sku="PROD2-001",
            quantity=1,
            price=Decimal("49.99"),
        )
    ]
    shop.orders = [order1, order2]

    return shop


async def seed_test_data(store: SqlAlchemyStore, settings: Settings) -> Optional[Shop]:
    """Load the fixture shop. Returns None when it is already present."""
    logger.info("Starting database seed...")

    existing = await store.find_one(
        Shop, {"access_token": settings.SEED_ACCESS_TOKEN}
    )
    if existing is not None:
        logger.info("Shop %s already seeded, skipping", existing.shop_name)
        return None

    shop = await store.save(
        Shop, build_seed_shop(settings.SEED_SHOP_NAME, settings.SEED_ACCESS_TOKEN)
    )
    logger.info("Seeded shop %s with 2 products, 3 variants, 2 orders", shop.id)
    return shop


async def reset_data(db: AsyncSession) -> None:
    logger.info("Resetting database...")
    for model in RESET_ORDER:
        await db.execute(delete(model))
    await db.commit()
    logger.info("Database reset completed")

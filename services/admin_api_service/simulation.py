"""Random order generation for load and flow simulation."""

import random
import secrets
import string
import time
from decimal import Decimal
from typing import Optional

from libs.common.logging import get_logger
from services.admin_api_service.errors import NotFoundError
from services.admin_api_service.mapper import round_money
from services.admin_api_service.models import (
    Order,
    OrderFulfillmentStatus,
    OrderLineItem,
    OrderStatus,
    ProductVariant,
    Shop,
)
from services.admin_api_service.store import SqlAlchemyStore

logger = get_logger(__name__)

SUPPORTED_COUNTRIES = [
    "US", "UK", "AT", "BE", "BG", "HR", "CY", "CZ", "DK", "EE",
    "FI", "FR", "DE", "GR", "HU", "IE", "IT", "LV", "LT", "LU",
    "MT", "NL", "PL", "PT", "RO", "SK", "SI", "ES", "SE", "GB",
]  # fmt: skip

RANDOM_ORDER_STATUSES = [
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
    OrderStatus.COMPLETED,
]

FIRST_NAMES = ["Ada", "Bruno", "Chloe", "Dmitri", "Elena", "Femi", "Greta", "Hiro", "Ines", "Jonas"]
LAST_NAMES = ["Okafor", "Schmidt", "Rossi", "Novak", "Dubois", "Jensen", "Silva", "Kowalski", "Murphy", "Berg"]
STREETS = ["Main St", "High St", "Market Sq", "Station Rd", "Park Ave", "Harbour Way", "Mill Ln"]
CITIES = ["Springfield", "Riverton", "Lakeside", "Brookfield", "Fairview", "Greenville", "Hillcrest"]
PROVINCES = ["NY", "CA", "TX", "WA", "BY", "NH", "ZH", "MI"]
COMPANIES = ["Acme Ltd", "Globex", "Initech", "Umbrella Co", "Hooli", "Vandelay Industries"]
WORDS = ["summer", "launch", "promo", "vip", "gift", "flash", "restock", "bundle", "loyalty"]


def _maybe(probability: float, value):
    return value if random.random() < probability else None


def random_shipping_address(first_name: str, last_name: str) -> dict:
    country = random.choice(SUPPORTED_COUNTRIES)
    province = random.choice(PROVINCES)
    return {
        "firstName": first_name,
        "lastName": last_name,
        "name": f"{first_name} {last_name}",
        "address1": f"{random.randint(1, 9999)} {random.choice(STREETS)}",
        "address2": _maybe(0.2, f"Apt {random.randint(1, 400)}") or "",
        "city": random.choice(CITIES),
        "company": random.choice(COMPANIES),
        "country": country,
        "countryCode": country,
        "countryCodeV2": country,
        "phone": f"+1-555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
        "province": province,
        "provinceCode": province,
        "zip": f"{random.randint(10000, 99999)}",
    }


def random_metadata() -> dict:
    return {
        "source": random.choice(["web", "mobile", "api"]),
        "channel": random.choice(["online_store", "instagram", "facebook"]),
        "utm_source": _maybe(0.5, random.choice(WORDS)),
        "utm_campaign": _maybe(0.5, random.choice(WORDS)),
        "discount_code": _maybe(
            0.2,
            "".join(secrets.choice(string.ascii_uppercase + string.digits) for _ in range(8)),
        ),
        "notes": _maybe(0.3, f"Please handle the {random.choice(WORDS)} order with care."),
        "tags": _maybe(0.4, random.sample(WORDS, 2)),
    }


def build_random_order(shop: Shop, variants: list[ProductVariant]) -> Order:
    first_name = random.choice(FIRST_NAMES)
    last_name = random.choice(LAST_NAMES)

    line_items = []
    subtotal = Decimal("0")
    for position in range(random.randint(1, 5)):
        variant = random.choice(variants)
        quantity = random.randint(1, 10)
        price = Decimal(variant.price)
        subtotal += price * quantity
        line_items.append(
            OrderLineItem(
                position=position,
                variant_external_id=variant.external_id,
                title=variant.title,
                sku=variant.sku,
                quantity=quantity,
                price=price,
            )
        )

    order = Order(
        shop_id=shop.id,
        external_id=f"order-{int(time.time() * 1000)}-{secrets.token_hex(3)}",
        order_number=random.randint(1000, 99999),
        customer_email=f"{first_name}.{last_name}{random.randint(1, 999)}@example.com".lower(),
        status=random.choice(RANDOM_ORDER_STATUSES),
        fulfillment_status=OrderFulfillmentStatus.UNSHIPPED,
        shipping_address=random_shipping_address(first_name, last_name),
        metadata_=random_metadata(),
        total_price=round_money(subtotal),
    )
    order.line_items = line_items
    return order


async def create_random_order(
    store: SqlAlchemyStore, shop: Optional[Shop] = None
) -> Order:
    """Persist one random unshipped order for a random (or given) shop."""
    if shop is None:
        shops = await store.find(Shop)
        if not shops:
            raise NotFoundError("No shops found. Please seed the database first.")
        shop = random.choice(shops)

    variants = await store.find(ProductVariant, {"product.shop_id": shop.id})
    if not variants:
        raise NotFoundError("No variants found. Please seed the database first.")

    order = await store.save(Order, build_random_order(shop, variants))
    logger.info(
        "Created order %s #%s for %s with %s line items. Total: %s",
        order.external_id,
        order.order_number,
        order.customer_email,
        len(order.line_items),
        order.total_price,
    )
    return order

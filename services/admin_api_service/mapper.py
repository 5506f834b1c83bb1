"""Render stored rows into the platform's Admin API response tree.

Every entity reference leaves here as a global id. Commercial totals are
derived from the stored subtotal on each render; nothing but the subtotal
is persisted.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Iterable, Optional, Sequence

from libs.common.config import Settings
from libs.common.datetime_utils import to_iso8601
from services.admin_api_service.cursor import encode_cursor
from services.admin_api_service.models import (
    Fulfillment,
    Order,
    OrderLineItem,
    ProductVariant,
)
from services.admin_api_service.params import to_gid

CENT = Decimal("0.01")

ADDRESS_FIELDS = (
    "address1",
    "address2",
    "city",
    "company",
    "country",
    "firstName",
    "lastName",
    "name",
    "phone",
    "province",
    "provinceCode",
    "zip",
)


def round_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _upper(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(getattr(value, "value", value)).upper()


@dataclass(frozen=True)
class PricingConfig:
    """Constants the mapper needs to derive money fields and ids."""

    shipping_price: Decimal = Decimal("10.00")
    tax_rate: Decimal = Decimal("0.08")
    currency_code: str = "USD"
    platform: str = "shopify"

    @classmethod
    def from_settings(cls, settings: Settings) -> "PricingConfig":
        return cls(
            shipping_price=Decimal(settings.SHIPPING_PRICE),
            tax_rate=Decimal(settings.TAX_RATE),
            currency_code=settings.CURRENCY_CODE,
            platform=settings.PLATFORM_NAME,
        )


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal


class ResponseMapper:
    def __init__(self, pricing: PricingConfig):
        self.pricing = pricing

    def gid(self, type_name: str, internal_id: Any) -> Optional[str]:
        return to_gid(self.pricing.platform, type_name, internal_id)

    # ------------------------------------------------------------------
    # Money
    # ------------------------------------------------------------------

    def order_totals(self, subtotal: Decimal) -> OrderTotals:
        """tax = round(subtotal * rate); total = round(subtotal + shipping + tax)."""
        subtotal = round_money(Decimal(subtotal or 0))
        shipping = round_money(self.pricing.shipping_price)
        tax = round_money(subtotal * self.pricing.tax_rate)
        return OrderTotals(
            subtotal=subtotal,
            shipping=shipping,
            tax=tax,
            total=round_money(subtotal + shipping + tax),
        )

    def money_bag(self, amount: Decimal) -> dict:
        return {
            "shopMoney": {
                "amount": str(round_money(amount)),
                "currencyCode": self.pricing.currency_code,
            }
        }

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    @staticmethod
    def connection(
        rows: Sequence[Any],
        render: Callable[[Any], dict],
        *,
        has_next_page: Optional[bool] = None,
    ) -> dict:
        """Wrap rows as ``{edges: [{node, cursor}]}``.

        ``pageInfo`` is included when ``has_next_page`` is given.
        """
        result: dict[str, Any] = {
            "edges": [
                {"node": render(row), "cursor": encode_cursor(row.id)} for row in rows
            ]
        }
        if has_next_page is not None:
            result["pageInfo"] = {
                "hasNextPage": has_next_page,
                "endCursor": encode_cursor(rows[-1].id) if rows else None,
            }
        return result

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    @staticmethod
    def address(raw: Optional[dict]) -> dict:
        raw = raw or {}
        rendered = {name: raw.get(name) for name in ADDRESS_FIELDS}
        rendered["countryCodeV2"] = (
            raw.get("countryCodeV2") or raw.get("countryCode") or raw.get("country") or "US"
        )
        return rendered

    def line_item(self, item: OrderLineItem) -> dict:
        price = round_money(item.price)
        return {
            "id": self.gid("LineItem", item.id),
            "variantId": self.gid("ProductVariant", item.variant_external_id),
            "title": item.title,
            "sku": item.sku,
            "quantity": item.quantity,
            "originalPrice": str(price),
            "originalUnitPriceSet": self.money_bag(price),
        }

    def fulfillment(self, fulfillment: Fulfillment) -> dict:
        return {
            "id": self.gid("Fulfillment", fulfillment.external_id),
            "status": _upper(fulfillment.status),
            "trackingInfo": {
                "number": fulfillment.tracking_number,
                "url": fulfillment.tracking_url,
            },
            "createdAt": to_iso8601(fulfillment.created_at),
        }

    def order(self, order: Order) -> dict:
        totals = self.order_totals(order.total_price)
        metadata = order.metadata_ or {}
        tags = metadata.get("tags") or []

        return {
            "id": self.gid("Order", order.external_id),
            "name": f"#{order.order_number}",
            "email": order.customer_email,
            "currencyCode": self.pricing.currency_code,
            "createdAt": to_iso8601(order.created_at),
            "updatedAt": to_iso8601(order.updated_at),
            "displayFinancialStatus": _upper(order.status),
            "fulfillmentStatus": _upper(order.fulfillment_status),
            "displayFulfillmentStatus": _upper(order.fulfillment_status),
            "tags": list(tags) if isinstance(tags, (list, tuple)) else [str(tags)],
            "sourceName": metadata.get("source"),
            "note": metadata.get("notes"),
            "lineItems": self.connection(order.line_items or [], self.line_item),
            "shippingAddress": self.address(order.shipping_address),
            "subtotalPrice": str(totals.subtotal),
            "totalShippingPrice": str(totals.shipping),
            "totalTax": str(totals.tax),
            "totalPrice": str(totals.total),
            "subtotalPriceSet": self.money_bag(totals.subtotal),
            "totalShippingPriceSet": self.money_bag(totals.shipping),
            "totalTaxSet": self.money_bag(totals.tax),
            "totalPriceSet": self.money_bag(totals.total),
            "fulfillments": self.connection(order.fulfillments or [], self.fulfillment),
        }

    def variant(self, variant: ProductVariant) -> dict:
        product = variant.product
        return {
            "id": self.gid("ProductVariant", variant.external_id),
            "title": variant.title,
            "sku": variant.sku,
            "price": str(round_money(variant.price)),
            "inventoryQuantity": variant.quantity,
            "product": (
                {"id": self.gid("Product", product.external_id), "title": product.title}
                if product is not None
                else None
            ),
        }

    def orders(self, rows: Iterable[Order], has_next_page: bool) -> dict:
        return self.connection(list(rows), self.order, has_next_page=has_next_page)

    def variants(self, rows: Iterable[ProductVariant], has_next_page: bool) -> dict:
        return self.connection(list(rows), self.variant, has_next_page=has_next_page)

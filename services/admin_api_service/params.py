"""Parameter extraction for the supported operations.

Bound variables win. Queries fall back to pattern extraction from the
literal text; mutations read variables only.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from services.admin_api_service.models.enums import OrderFulfillmentStatus

_ORDER_ID_LITERAL = re.compile(r'order\(id:\s*"([^"]+)"')
_ORDERS_FIRST_LITERAL = re.compile(r"orders\(\s*first:\s*(\d+)")
_VARIANTS_FIRST_LITERAL = re.compile(r"productVariants\(\s*first:\s*(\d+)")

ANY_FULFILLMENT_STATUS = "any"
DEFAULT_FULFILLMENT_STATUS = "unshipped"
FULFILLMENT_STATUS_VALUES = frozenset(s.value for s in OrderFulfillmentStatus)


# ============================================================================
# GLOBAL IDENTIFIERS
# ============================================================================


def gid_prefix(platform: str, type_name: str) -> str:
    return f"gid://{platform}/{type_name}/"


def to_gid(platform: str, type_name: str, internal_id: Any) -> Optional[str]:
    """Render ``gid://<platform>/<type_name>/<id>``.

    Ids that already carry the prefix for this type are returned as-is.
    """
    if internal_id is None:
        return None
    value = str(internal_id)
    prefix = gid_prefix(platform, type_name)
    if value.startswith(prefix):
        return value
    return prefix + value


def from_gid(platform: str, type_name: str, value: Any) -> Optional[str]:
    """Strip exactly the ``type_name`` gid prefix; other values pass through."""
    if value is None:
        return None
    value = str(value)
    prefix = gid_prefix(platform, type_name)
    if value.startswith(prefix):
        return value[len(prefix):]
    return value


# ============================================================================
# PARAMETER OBJECTS
# ============================================================================


@dataclass(frozen=True)
class OrderGetParams:
    order_id: Optional[str]


@dataclass(frozen=True)
class OrdersListParams:
    first: int
    # None means no filter
    fulfillment_status: Optional[str] = DEFAULT_FULFILLMENT_STATUS
    # False when the requested status is not an OrderFulfillmentStatus value
    status_known: bool = True


@dataclass(frozen=True)
class VariantsListParams:
    first: int


@dataclass(frozen=True)
class FulfillmentCreateParams:
    order_id: Optional[str]
    tracking_number: Optional[str] = None
    tracking_url: Optional[str] = None
    line_items: list = field(default_factory=list)


@dataclass(frozen=True)
class InventorySetParams:
    variant_id: Optional[str]
    quantity: Optional[int]


# ============================================================================
# HELPERS
# ============================================================================


def _positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        parsed = int(value.strip())
        return parsed if parsed > 0 else None
    return None


def _resolve_first(
    variables: Mapping[str, Any], text: str, pattern: re.Pattern, default: int
) -> int:
    if "first" in variables:
        return _positive_int(variables.get("first")) or default
    match = pattern.search(text)
    if match:
        return _positive_int(match.group(1)) or default
    return default


def _first_present(variables: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = variables.get(key)
        if value is not None and value != "":
            return value
    return None


def _strict_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lstrip("-").isdigit():
            return int(stripped)
    return None


# ============================================================================
# EXTRACTORS
# ============================================================================


def extract_order_get(
    variables: Mapping[str, Any], text: str, platform: str
) -> OrderGetParams:
    raw_id = _first_present(variables, "id", "orderId")
    if raw_id is None:
        match = _ORDER_ID_LITERAL.search(text)
        raw_id = match.group(1) if match else None
    return OrderGetParams(order_id=from_gid(platform, "Order", raw_id))


def extract_orders_list(
    variables: Mapping[str, Any], text: str, default_first: int
) -> OrdersListParams:
    first = _resolve_first(variables, text, _ORDERS_FIRST_LITERAL, default_first)

    status = _first_present(variables, "fulfillment_status", "fulfillmentStatus")
    status = str(status).lower() if status is not None else DEFAULT_FULFILLMENT_STATUS
    if status == ANY_FULFILLMENT_STATUS:
        return OrdersListParams(first=first, fulfillment_status=None)

    # `after` is accepted and ignored; only the first page is served
    return OrdersListParams(
        first=first,
        fulfillment_status=status,
        status_known=status in FULFILLMENT_STATUS_VALUES,
    )


def extract_variants_list(
    variables: Mapping[str, Any], text: str, default_first: int
) -> VariantsListParams:
    return VariantsListParams(
        first=_resolve_first(variables, text, _VARIANTS_FIRST_LITERAL, default_first)
    )


def extract_fulfillment_create(
    variables: Mapping[str, Any], platform: str
) -> FulfillmentCreateParams:
    line_items = variables.get("lineItems")
    return FulfillmentCreateParams(
        order_id=from_gid(platform, "Order", _first_present(variables, "orderId")),
        tracking_number=variables.get("trackingNumber"),
        tracking_url=variables.get("trackingUrl"),
        line_items=list(line_items) if isinstance(line_items, list) else [],
    )


def extract_inventory_set(
    variables: Mapping[str, Any], platform: str
) -> InventorySetParams:
    return InventorySetParams(
        variant_id=from_gid(
            platform, "ProductVariant", _first_present(variables, "variantId")
        ),
        quantity=_strict_int(variables.get("quantity")),
    )

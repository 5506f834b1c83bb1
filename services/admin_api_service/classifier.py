"""Decide which supported operation a raw query/mutation string asks for.

There is no parser. The text is whitespace-normalized and then checked
against ordered (predicate, kind) tables; the first match wins.
"""

import enum
import re
from typing import Callable

Predicate = Callable[[str], bool]

_WHITESPACE = re.compile(r"\s+")


class OperationKind(str, enum.Enum):
    ORDERS_LIST = "OrdersList"
    ORDER_GET = "OrderGet"
    PRODUCT_VARIANTS_LIST = "ProductVariantsList"
    FULFILLMENT_CREATE = "FulfillmentCreate"
    INVENTORY_SET_QUANTITIES = "InventorySetQuantities"
    UNSUPPORTED_QUERY = "UnsupportedQuery"
    UNSUPPORTED_MUTATION = "UnsupportedMutation"

    @property
    def is_mutation(self) -> bool:
        return self in (
            OperationKind.FULFILLMENT_CREATE,
            OperationKind.INVENTORY_SET_QUANTITIES,
            OperationKind.UNSUPPORTED_MUTATION,
        )

    @property
    def is_supported(self) -> bool:
        return self not in (
            OperationKind.UNSUPPORTED_QUERY,
            OperationKind.UNSUPPORTED_MUTATION,
        )


def _contains(*needles: str) -> Predicate:
    return lambda text: any(needle in text for needle in needles)


MUTATION_RULES: tuple[tuple[Predicate, OperationKind], ...] = (
    (_contains("fulfillmentCreate"), OperationKind.FULFILLMENT_CREATE),
    (_contains("inventorySetQuantities"), OperationKind.INVENTORY_SET_QUANTITIES),
)

# Order matters: "orders(" must be tested before "order(".
QUERY_RULES: tuple[tuple[Predicate, OperationKind], ...] = (
    (_contains("orders("), OperationKind.ORDERS_LIST),
    (_contains("order(", "query {"), OperationKind.ORDER_GET),
    (_contains("productVariants"), OperationKind.PRODUCT_VARIANTS_LIST),
)


def normalize_query(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def is_mutation_text(normalized: str) -> bool:
    return normalized.startswith("mutation")


def classify(text: str) -> OperationKind:
    normalized = normalize_query(text)

    if is_mutation_text(normalized):
        rules, fallback = MUTATION_RULES, OperationKind.UNSUPPORTED_MUTATION
    else:
        rules, fallback = QUERY_RULES, OperationKind.UNSUPPORTED_QUERY

    for predicate, kind in rules:
        if predicate(normalized):
            return kind
    return fallback

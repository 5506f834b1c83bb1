"""Unit tests for operation classification."""

import pytest
from services.admin_api_service.classifier import (
    OperationKind,
    classify,
    normalize_query,
)


@pytest.mark.unit
def test_normalize_collapses_whitespace_runs():
    assert normalize_query("  {\n  orders(first: 10)\t{ id }\n}  ") == (
        "{ orders(first: 10) { id } }"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("{ orders(first: 10) { edges { node { id } } } }", OperationKind.ORDERS_LIST),
        ('{ order(id: "gid://shopify/Order/1") { id } }', OperationKind.ORDER_GET),
        ("query { shop { name } }", OperationKind.ORDER_GET),
        ("{ productVariants(first: 5) { edges { node { id } } } }", OperationKind.PRODUCT_VARIANTS_LIST),
        ("{ shop { name } }", OperationKind.UNSUPPORTED_QUERY),
    ],
)
def test_query_classification(text, expected):
    assert classify(text) is expected


@pytest.mark.unit
def test_orders_list_wins_over_single_order():
    """'orders(' contains 'order' but must not be treated as a single-order fetch."""
    assert classify("query { orders(first: 1) { edges { node { id } } } }") is (
        OperationKind.ORDERS_LIST
    )


@pytest.mark.unit
def test_multiline_query_keyword_is_normalized():
    assert classify("query\n{\n  order(id: \"1\") { id }\n}") is OperationKind.ORDER_GET


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        (
            "mutation fulfillmentCreate($fulfillment: FulfillmentInput!) { fulfillmentCreate(fulfillment: $fulfillment) { fulfillment { id } } }",
            OperationKind.FULFILLMENT_CREATE,
        ),
        (
            "mutation { inventorySetQuantities(input: $input) { userErrors { message } } }",
            OperationKind.INVENTORY_SET_QUANTITIES,
        ),
        ("mutation { productCreate(input: {}) { product { id } } }", OperationKind.UNSUPPORTED_MUTATION),
    ],
)
def test_mutation_classification(text, expected):
    assert classify(text) is expected


@pytest.mark.unit
def test_mutation_never_falls_through_to_query_rules():
    """A mutation mentioning orders( is still an unsupported mutation."""
    kind = classify("mutation { orderUpdate(input: {}) { orders(first: 1) { id } } }")
    assert kind is OperationKind.UNSUPPORTED_MUTATION
    assert kind.is_mutation
    assert not kind.is_supported


@pytest.mark.unit
def test_classification_is_stable_for_equivalent_whitespace():
    compact = "{ productVariants(first: 3) { edges { node { id } } } }"
    spread = "{\n\n   productVariants(first: 3)\n {\n edges { node { id } } } }"
    assert classify(compact) is classify(spread)

"""Turn one GraphQL request into a response envelope.

resolve tenant -> classify -> extract params -> handler -> envelope
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional

from libs.common.config import Settings
from libs.common.logging import get_logger
from services.admin_api_service import handlers
from services.admin_api_service.classifier import (
    OperationKind,
    classify,
    normalize_query,
)
from services.admin_api_service.errors import (
    MissingQueryError,
    NotFoundError,
    StoreFailureError,
    UnsupportedOperationError,
)
from services.admin_api_service.mapper import ResponseMapper
from services.admin_api_service.params import (
    extract_fulfillment_create,
    extract_inventory_set,
    extract_order_get,
    extract_orders_list,
    extract_variants_list,
)
from services.admin_api_service.store import SqlAlchemyStore
from services.admin_api_service.tenancy import resolve_tenant

logger = get_logger(__name__)

Handler = Callable[..., Awaitable[dict]]


@dataclass(frozen=True)
class DispatchContext:
    store: SqlAlchemyStore
    mapper: ResponseMapper
    settings: Settings


def _build_params(
    kind: OperationKind, variables: Mapping[str, Any], text: str, settings: Settings
):
    platform = settings.PLATFORM_NAME
    if kind is OperationKind.ORDERS_LIST:
        return extract_orders_list(variables, text, settings.ORDERS_PAGE_SIZE)
    if kind is OperationKind.ORDER_GET:
        return extract_order_get(variables, text, platform)
    if kind is OperationKind.PRODUCT_VARIANTS_LIST:
        return extract_variants_list(variables, text, settings.VARIANTS_PAGE_SIZE)
    if kind is OperationKind.FULFILLMENT_CREATE:
        return extract_fulfillment_create(variables, platform)
    if kind is OperationKind.INVENTORY_SET_QUANTITIES:
        return extract_inventory_set(variables, platform)
    raise UnsupportedOperationError(
        "Unsupported mutation" if kind.is_mutation else "Unsupported query"
    )


HANDLERS: dict[OperationKind, Handler] = {
    OperationKind.ORDERS_LIST: handlers.list_orders,
    OperationKind.ORDER_GET: handlers.get_order,
    OperationKind.PRODUCT_VARIANTS_LIST: handlers.list_product_variants,
    OperationKind.FULFILLMENT_CREATE: handlers.create_fulfillment,
    OperationKind.INVENTORY_SET_QUANTITIES: handlers.set_inventory_quantities,
}


def error_envelope(message: str, data: Any = None) -> dict:
    return {"data": data, "errors": [{"message": message}]}


async def execute_operation(
    context: DispatchContext,
    query: Optional[str],
    variables: Optional[Mapping[str, Any]] = None,
    credential: Optional[str] = None,
) -> dict:
    """Execute one operation and return ``{"data": ..., "errors"?: [...]}``.

    Raises ``MissingQueryError`` for a blank query; every other protocol
    failure is rendered into the envelope.
    """
    if not query or not query.strip():
        raise MissingQueryError()

    variables = variables or {}
    text = normalize_query(query)

    try:
        shop = await resolve_tenant(
            context.store, credential, context.settings.DEFAULT_TENANT_TOKEN
        )
        kind = classify(text)
        logger.debug(
            "Classified operation as %s for shop %s",
            kind.value,
            shop.shop_name if shop is not None else None,
        )

        params = _build_params(kind, variables, text, context.settings)
        data = await HANDLERS[kind](context.store, context.mapper, shop, params)
        return {"data": data}

    except UnsupportedOperationError as exc:
        logger.warning("%s: %.120s", exc.message, text)
        return error_envelope(exc.message)
    except NotFoundError as exc:
        logger.warning("%s", exc.message)
        data = {exc.field: None} if exc.field else None
        return error_envelope(exc.message, data)
    except StoreFailureError as exc:
        # Already logged with traceback by the store
        return error_envelope(exc.message)

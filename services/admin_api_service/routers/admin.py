"""Maintenance endpoints: seed, reset, and raw record inspection."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from libs.common.config import Settings, get_settings
from libs.common.logging import get_logger
from libs.db.session import get_async_db
from services.admin_api_service.dependencies import get_store
from services.admin_api_service.models import Order, Shop
from services.admin_api_service.schemas import (
    MessageResponse,
    OrderDetailResponse,
    OrderListResponse,
    OrderResponse,
    OrderStatusUpdate,
    OrderStatusUpdateResponse,
    ShopListResponse,
    ShopResponse,
)
from services.admin_api_service.seed import reset_data, seed_test_data
from services.admin_api_service.store import SqlAlchemyStore
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/admin", tags=["admin"])
logger = get_logger(__name__)

ORDER_RELATIONS = ("line_items", "fulfillments")


@router.post("/seed", response_model=MessageResponse, status_code=201)
async def seed(
    store: SqlAlchemyStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Load the fixture shop, products, variants and orders."""
    await seed_test_data(store, settings)
    return MessageResponse(message="Database seeded successfully")


@router.post("/reset", response_model=MessageResponse)
async def reset(db: AsyncSession = Depends(get_async_db)):
    """Delete every row."""
    await reset_data(db)
    return MessageResponse(message="Database reset successfully")


# ============================================================================
# ORDERS
# ============================================================================


@router.get("/orders", response_model=OrderListResponse)
async def list_orders(store: SqlAlchemyStore = Depends(get_store)):
    """All orders across shops with line items and fulfillments."""
    orders = await store.find(
        Order, order=[("created_at", "asc")], load=ORDER_RELATIONS
    )
    return OrderListResponse(
        orders=[OrderResponse.model_validate(order) for order in orders]
    )


@router.get("/orders/{order_id}", response_model=OrderDetailResponse)
async def get_order(order_id: uuid.UUID, store: SqlAlchemyStore = Depends(get_store)):
    order = await store.find_one(Order, {"id": order_id}, load=ORDER_RELATIONS)
    return OrderDetailResponse(
        order=OrderResponse.model_validate(order) if order is not None else None
    )


@router.post("/orders/{order_id}/status", response_model=OrderStatusUpdateResponse)
async def update_order_status(
    order_id: uuid.UUID,
    body: OrderStatusUpdate,
    store: SqlAlchemyStore = Depends(get_store),
):
    """Move an order to another fulfillment status."""
    order = await store.find_one(Order, {"id": order_id}, load=ORDER_RELATIONS)
    if order is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Order not found"
        )

    previous = order.fulfillment_status
    order.fulfillment_status = body.fulfillment_status
    await store.save(Order, order)
    logger.info(
        "Order %s fulfillment status %s -> %s",
        order.external_id,
        getattr(previous, "value", previous),
        body.fulfillment_status.value,
    )

    return OrderStatusUpdateResponse(
        message="Order status updated", order=OrderResponse.model_validate(order)
    )


# ============================================================================
# SHOPS
# ============================================================================


@router.get("/shops", response_model=ShopListResponse)
async def list_shops(store: SqlAlchemyStore = Depends(get_store)):
    """All shops with their access tokens."""
    shops = await store.find(Shop, order=[("created_at", "asc")])
    return ShopListResponse(shops=[ShopResponse.model_validate(shop) for shop in shops])

"""Pydantic schemas for the admin API mock."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from services.admin_api_service.models import (
    FulfillmentStatus,
    OrderFulfillmentStatus,
    OrderStatus,
)

# ============================================================================
# GRAPHQL SCHEMAS
# ============================================================================


class GraphQLRequest(BaseModel):
    """Body of a GraphQL POST. ``query`` is validated by the router, not here."""

    model_config = ConfigDict(populate_by_name=True)

    query: Optional[str] = None
    variables: Optional[dict[str, Any]] = None
    operation_name: Optional[str] = Field(None, alias="operationName")


# ============================================================================
# ADMIN SCHEMAS
# ============================================================================


class MessageResponse(BaseModel):
    message: str


class ShopResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    shop_name: str
    access_token: str
    created_at: datetime
    updated_at: datetime


class ShopListResponse(BaseModel):
    shops: list[ShopResponse]


class LineItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    order_id: uuid.UUID
    position: int
    variant_external_id: str
    title: str
    sku: str
    quantity: int
    price: Decimal


class FulfillmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    order_id: uuid.UUID
    external_id: str
    status: FulfillmentStatus
    line_items: list = []
    tracking_number: Optional[str] = None
    tracking_url: Optional[str] = None
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    created_at: datetime


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    shop_id: uuid.UUID
    external_id: str
    order_number: int
    customer_email: str
    status: OrderStatus
    fulfillment_status: OrderFulfillmentStatus
    shipping_address: dict = {}
    total_price: Decimal
    metadata: dict = Field(
        default_factory=dict, validation_alias=AliasChoices("metadata_", "metadata")
    )
    created_at: datetime
    updated_at: datetime
    line_items: list[LineItemResponse] = []
    fulfillments: list[FulfillmentResponse] = []


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]


class OrderDetailResponse(BaseModel):
    order: Optional[OrderResponse] = None


class OrderStatusUpdate(BaseModel):
    fulfillment_status: OrderFulfillmentStatus


class OrderStatusUpdateResponse(BaseModel):
    message: str
    order: OrderResponse


# ============================================================================
# SIMULATION SCHEMAS
# ============================================================================


class CreateOrdersRequest(BaseModel):
    count: int = Field(5, ge=1, le=500)


class SimulatedOrderSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    external_id: str
    order_number: int
    customer_email: str
    total_price: Decimal


class CreateOrdersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    orders_created: int = Field(alias="ordersCreated")
    orders: list[SimulatedOrderSummary]


class RecentOrderSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    external_id: str
    order_number: int
    status: OrderFulfillmentStatus = Field(
        validation_alias=AliasChoices("fulfillment_status", "status")
    )
    total_price: Decimal


class SimulationStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_orders: int = Field(alias="totalOrders")
    by_status: dict[str, int] = Field(alias="byStatus")
    recent_orders: list[RecentOrderSummary] = Field(alias="recentOrders")


class BackendSyncRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    backend_url: Optional[str] = Field(None, alias="backendUrl")


class BackendSyncResponse(BaseModel):
    success: bool
    message: str
    response: Any = None
    hint: Optional[str] = None


class FullFlowRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_count: int = Field(3, ge=1, le=500, alias="orderCount")


class FlowStep(BaseModel):
    status: str
    description: str
    endpoint: Optional[str] = None


class FullFlowResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    orders_created: int = Field(alias="ordersCreated")
    orders: list[SimulatedOrderSummary]
    flow: dict[str, FlowStep]
    monitoring: dict[str, str]

"""Order models: orders, line items, fulfillments."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base, JSONDocument
from services.admin_api_service.models.enums import (
    FulfillmentStatus,
    OrderFulfillmentStatus,
    OrderStatus,
    enum_values,
)
from sqlalchemy import DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Index, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

# ============================================================================
# ORDER MODELS
# ============================================================================


class Order(Base):
    """Orders placed against a shop."""

    __tablename__ = "mock_orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    shop_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("mock_shops.id", ondelete="CASCADE"), nullable=False
    )
    external_id: Mapped[str] = mapped_column(String(255), nullable=False)
    order_number: Mapped[int] = mapped_column(Integer, nullable=False)
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)

    # Commercial and fulfillment state move independently
    status: Mapped[OrderStatus] = mapped_column(
        SAEnum(
            OrderStatus,
            values_callable=enum_values,
            name="mock_order_status_enum",
        ),
        default=OrderStatus.PENDING,
        server_default="pending",
    )
    fulfillment_status: Mapped[OrderFulfillmentStatus] = mapped_column(
        SAEnum(
            OrderFulfillmentStatus,
            values_callable=enum_values,
            name="mock_order_fulfillment_status_enum",
        ),
        default=OrderFulfillmentStatus.UNSHIPPED,
        server_default="unshipped",
    )

    shipping_address: Mapped[dict] = mapped_column(
        JSONDocument, nullable=False, default=dict
    )  # {"firstName": ..., "address1": ..., "country": "US", ...}

    # Sum of line items at creation; tax/shipping/total are derived on read
    total_price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False, default=Decimal("0")
    )

    metadata_: Mapped[dict] = mapped_column(
        "metadata", JSONDocument, nullable=False, default=dict
    )  # {"source": "web", "channel": "online_store", "tags": [...], "notes": ...}

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    __table_args__ = (
        Index("ix_mock_orders_shop_external_id", "shop_id", "external_id"),
        Index("ix_mock_orders_shop_fulfillment_status", "shop_id", "fulfillment_status"),
    )

    # Relationships
    shop = relationship("Shop", back_populates="orders")
    line_items = relationship(
        "OrderLineItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineItem.position",
    )
    fulfillments = relationship(
        "Fulfillment",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="Fulfillment.created_at",
    )

    def __repr__(self):
        return f"<Order #{self.order_number} {self.external_id}>"


class OrderLineItem(Base):
    """Snapshot of a purchased variant at order time.

    ``variant_external_id`` is the variant's external id, not a foreign key:
    the variant may change or disappear after the order is placed.
    """

    __tablename__ = "mock_order_line_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("mock_orders.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    variant_external_id: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    # Relationships
    order = relationship("Order", back_populates="line_items")

    def __repr__(self):
        return f"<OrderLineItem {self.sku} qty={self.quantity}>"


class Fulfillment(Base):
    """Shipment covering some or all of an order's line items."""

    __tablename__ = "mock_fulfillments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("mock_orders.id", ondelete="CASCADE"), nullable=False
    )
    external_id: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[FulfillmentStatus] = mapped_column(
        SAEnum(
            FulfillmentStatus,
            values_callable=enum_values,
            name="mock_fulfillment_status_enum",
        ),
        default=FulfillmentStatus.PENDING,
        server_default="pending",
    )
    line_items: Mapped[list] = mapped_column(JSONDocument, nullable=False, default=list)
    tracking_number: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    tracking_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    shipped_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    delivered_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    # Relationships
    order = relationship("Order", back_populates="fulfillments")

    def __repr__(self):
        return f"<Fulfillment {self.external_id} status={self.status}>"

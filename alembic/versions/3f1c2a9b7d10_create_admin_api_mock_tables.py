"""create_admin_api_mock_tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONDocument = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")

order_status = sa.Enum(
    'pending', 'confirmed', 'processing', 'cancelled', 'completed',
    name='mock_order_status_enum',
)
order_fulfillment_status = sa.Enum(
    'unshipped', 'shipped', 'delivered', 'cancelled',
    name='mock_order_fulfillment_status_enum',
)
fulfillment_status = sa.Enum(
    'pending', 'scheduled', 'in_transit', 'delivered', 'failure',
    name='mock_fulfillment_status_enum',
)


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema - Create shop, catalog and order tables."""

    op.create_table(
        'mock_shops',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('shop_name', sa.String(length=255), nullable=False),
        sa.Column('access_token', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_mock_shops_access_token', 'mock_shops', ['access_token'])

    op.create_table(
        'mock_products',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('shop_id', sa.Uuid(), nullable=False),
        sa.Column('external_id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('images', JSONDocument, nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['shop_id'], ['mock_shops.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_mock_products_shop_id', 'mock_products', ['shop_id'])

    op.create_table(
        'mock_variants',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('external_id', sa.String(length=255), nullable=False),
        sa.Column('sku', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['product_id'], ['mock_products.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_mock_variants_external_id', 'mock_variants', ['external_id'])

    op.create_table(
        'mock_orders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('shop_id', sa.Uuid(), nullable=False),
        sa.Column('external_id', sa.String(length=255), nullable=False),
        sa.Column('order_number', sa.Integer(), nullable=False),
        sa.Column('customer_email', sa.String(length=255), nullable=False),
        sa.Column('status', order_status, server_default='pending', nullable=True),
        sa.Column(
            'fulfillment_status',
            order_fulfillment_status,
            server_default='unshipped',
            nullable=True,
        ),
        sa.Column('shipping_address', JSONDocument, nullable=False),
        sa.Column('total_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('metadata', JSONDocument, nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['shop_id'], ['mock_shops.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_mock_orders_shop_external_id', 'mock_orders', ['shop_id', 'external_id']
    )
    op.create_index(
        'ix_mock_orders_shop_fulfillment_status',
        'mock_orders',
        ['shop_id', 'fulfillment_status'],
    )

    op.create_table(
        'mock_order_line_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('position', sa.Integer(), server_default='0', nullable=True),
        sa.Column('variant_external_id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('sku', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['order_id'], ['mock_orders.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'mock_fulfillments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('external_id', sa.String(length=255), nullable=False),
        sa.Column('status', fulfillment_status, server_default='pending', nullable=True),
        sa.Column('line_items', JSONDocument, nullable=False),
        sa.Column('tracking_number', sa.String(length=255), nullable=True),
        sa.Column('tracking_url', sa.String(length=512), nullable=True),
        sa.Column('shipped_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('delivered_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['order_id'], ['mock_orders.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Downgrade schema - Drop all mock tables."""
    op.drop_table('mock_fulfillments')
    op.drop_table('mock_order_line_items')
    op.drop_index('ix_mock_orders_shop_fulfillment_status', table_name='mock_orders')
    op.drop_index('ix_mock_orders_shop_external_id', table_name='mock_orders')
    op.drop_table('mock_orders')
    op.drop_index('ix_mock_variants_external_id', table_name='mock_variants')
    op.drop_table('mock_variants')
    op.drop_index('ix_mock_products_shop_id', table_name='mock_products')
    op.drop_table('mock_products')
    op.drop_index('ix_mock_shops_access_token', table_name='mock_shops')
    op.drop_table('mock_shops')

    bind = op.get_bind()
    for enum_type in (fulfillment_status, order_fulfillment_status, order_status):
        enum_type.drop(bind, checkfirst=True)

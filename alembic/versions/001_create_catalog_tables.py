"""Create catalog tables.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Create categories, products, options, variants and images tables."""
    # Categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('parent_id', sa.String(36),
                  sa.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=True, index=True),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False, index=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category_id', sa.String(36),
                  sa.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False, index=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft', index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.now(), index=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # Product options table
    op.create_table(
        'product_options',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('option_name', sa.String(50), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    # Product variants table
    op.create_table(
        'product_variants',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('sku', sa.String(50), nullable=False),
        sa.Column('barcode', sa.String(30), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('price', sa.Integer(), nullable=False, index=True),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.UniqueConstraint('sku', name='uq_product_variants_sku'),
    )

    # Product variant options table
    op.create_table(
        'product_variant_options',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_variant_id', sa.String(36),
                  sa.ForeignKey('product_variants.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('option_name', sa.String(50), nullable=False),
        sa.Column('option_value', sa.String(50), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    # Product images table
    op.create_table(
        'product_images',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('product_variant_id', sa.String(36),
                  sa.ForeignKey('product_variants.id', ondelete='SET NULL'), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
    )


def downgrade() -> None:
    """Drop the catalog tables."""
    op.drop_table('product_images')
    op.drop_table('product_variant_options')
    op.drop_table('product_variants')
    op.drop_table('product_options')
    op.drop_table('products')
    op.drop_table('categories')

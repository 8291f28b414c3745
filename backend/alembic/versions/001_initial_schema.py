"""Initial schema — stores, billboards, categories, sizes, colors, products, images.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Store-scoped FKs are ON DELETE RESTRICT: a referenced billboard, category, size,
color or non-empty store cannot be deleted. images.product_id cascades.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _store_fk() -> sa.Column:
    return sa.Column(
        "store_id", sa.String(36),
        sa.ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True,
    )


def upgrade() -> None:
    op.create_table(
        "stores",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False, index=True),
        *_timestamps(),
    )

    op.create_table(
        "billboards",
        sa.Column("id", sa.String(36), primary_key=True),
        _store_fk(),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("image_url", sa.Text, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.String(36), primary_key=True),
        _store_fk(),
        sa.Column(
            "billboard_id", sa.String(36),
            sa.ForeignKey("billboards.id", ondelete="RESTRICT"), nullable=False, index=True,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
    )

    for table in ("sizes", "colors"):
        op.create_table(
            table,
            sa.Column("id", sa.String(36), primary_key=True),
            _store_fk(),
            sa.Column("name", sa.String(255), nullable=False),
            sa.Column("value", sa.String(255), nullable=False),
            *_timestamps(),
        )

    op.create_table(
        "products",
        sa.Column("id", sa.String(36), primary_key=True),
        _store_fk(),
        sa.Column(
            "category_id", sa.String(36),
            sa.ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True,
        ),
        sa.Column(
            "size_id", sa.String(36),
            sa.ForeignKey("sizes.id", ondelete="RESTRICT"), nullable=False, index=True,
        ),
        sa.Column(
            "color_id", sa.String(36),
            sa.ForeignKey("colors.id", ondelete="RESTRICT"), nullable=False, index=True,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("is_archived", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "images",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "product_id", sa.String(36),
            sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True,
        ),
        sa.Column("url", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("images")
    op.drop_table("products")
    op.drop_table("colors")
    op.drop_table("sizes")
    op.drop_table("categories")
    op.drop_table("billboards")
    op.drop_table("stores")

"""Product ORM — a sellable item with its category, size, color and image gallery.

Invariants:
    - Belongs to a Store; category, size and color belong to the same store
    - price is Numeric(10, 2), never float
    - images are owned: ORM delete-orphan plus ON DELETE CASCADE, so replacing
      the list deletes the old rows and deleting the product removes them all
    - archived products are hidden from public listings, not deleted

Design Decisions:
    - images lazy="selectin": every product response embeds them, and async
      sessions cannot lazy-load on attribute access
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Boolean, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Product(Base):
    """Product entity — owns its Image rows."""
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    category_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    size_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("sizes.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    color_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("colors.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    is_archived: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    store: Mapped["Store"] = relationship("Store", back_populates="products")
    category: Mapped["Category"] = relationship(
        "Category", back_populates="products",
    )
    size: Mapped["Size"] = relationship("Size", back_populates="products")
    color: Mapped["Color"] = relationship("Color", back_populates="products")
    images: Mapped[list["Image"]] = relationship(
        "Image", back_populates="product",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Image.created_at",
    )

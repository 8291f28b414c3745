"""Category ORM — groups products and shows one billboard.

Invariants:
    - Belongs to a Store and a Billboard of that same store
    - products reference categories.id with ON DELETE RESTRICT
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    billboard_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("billboards.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
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
    store: Mapped["Store"] = relationship("Store", back_populates="categories")
    billboard: Mapped["Billboard"] = relationship(
        "Billboard", back_populates="categories",
    )
    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="category", passive_deletes="all",
    )

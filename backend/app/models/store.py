"""Store ORM — the tenant root every other admin entity hangs off.

Invariants:
    - id is a UUID4 string generated client-side
    - user_id is the identity provider's subject of the owner (indexed: every
      mutating request looks the store up by (id, user_id))
    - children reference stores.id with ON DELETE RESTRICT: a store with
      billboards, categories, sizes, colors or products cannot be deleted

Design Decisions:
    - No ORM cascade on children: the database decides, the service maps the
      IntegrityError to ReferentialIntegrityError
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Store(Base):
    """Store aggregate root — owned by exactly one user."""
    __tablename__ = "stores"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
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
    billboards: Mapped[list["Billboard"]] = relationship(
        "Billboard", back_populates="store", passive_deletes="all",
    )
    categories: Mapped[list["Category"]] = relationship(
        "Category", back_populates="store", passive_deletes="all",
    )
    sizes: Mapped[list["Size"]] = relationship(
        "Size", back_populates="store", passive_deletes="all",
    )
    colors: Mapped[list["Color"]] = relationship(
        "Color", back_populates="store", passive_deletes="all",
    )
    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="store", passive_deletes="all",
    )

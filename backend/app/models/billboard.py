"""Billboard ORM — a labelled hero image shown above a category.

Invariants:
    - Always belongs to a Store (store_id FK, RESTRICT)
    - image_url points at an asset on the media host
    - categories reference billboards.id with ON DELETE RESTRICT
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Billboard(Base):
    """Billboard entity — label plus hosted image."""
    __tablename__ = "billboards"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
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
    store: Mapped["Store"] = relationship("Store", back_populates="billboards")
    categories: Mapped[list["Category"]] = relationship(
        "Category", back_populates="billboard", passive_deletes="all",
    )

"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - StoreId and UserId wrap str — ids are opaque text (UUID4 for our rows,
      provider-issued for users)
    - EntityKind names every store-scoped resource exactly once

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes straight into logs and error envelopes
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StoreId = NewType("StoreId", str)
UserId = NewType("UserId", str)
AssetId = NewType("AssetId", str)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Resources managed through the admin API."""
    STORE = "Store"
    BILLBOARD = "Billboard"
    CATEGORY = "Category"
    SIZE = "Size"
    COLOR = "Color"
    PRODUCT = "Product"

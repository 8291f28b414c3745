"""ORM Models — SQLAlchemy declarative models for all store-admin entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Store is the tenant root; every other entity is scoped by store_id
      (Image indirectly, through its Product)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.store import Store  # noqa: F401
from app.models.billboard import Billboard  # noqa: F401
from app.models.category import Category  # noqa: F401
from app.models.size import Size  # noqa: F401
from app.models.color import Color  # noqa: F401
from app.models.product import Product  # noqa: F401
from app.models.image import Image  # noqa: F401

"""Product Schemas — product fields plus its full image list.

Invariants:
    - name non-empty; price >= 0.01 with at most 2 decimal places
    - category/size/color ids non-empty
    - images: at least one {url}; the list replaces the stored gallery wholesale
    - is_featured / is_archived default to False
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from app.schemas.common import ApiModel


class ImagePayload(ApiModel):
    url: str = Field(min_length=1)


class ProductPayload(ApiModel):
    """Product create/update body."""
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=Decimal("0.01"), max_digits=10, decimal_places=2)
    category_id: str = Field(min_length=1)
    size_id: str = Field(min_length=1)
    color_id: str = Field(min_length=1)
    images: list[ImagePayload] = Field(min_length=1)
    is_featured: bool = False
    is_archived: bool = False


class ImageResponse(ApiModel):
    id: str
    product_id: str
    url: str
    created_at: datetime


class ProductResponse(ApiModel):
    id: str
    store_id: str
    category_id: str
    size_id: str
    color_id: str
    name: str
    price: Decimal
    is_featured: bool
    is_archived: bool
    images: list[ImageResponse]
    created_at: datetime
    updated_at: datetime

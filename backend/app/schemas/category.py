"""Category Schemas — name plus the billboard it shows."""

from datetime import datetime

from pydantic import Field

from app.schemas.common import ApiModel


class CategoryPayload(ApiModel):
    name: str = Field(min_length=2)
    billboard_id: str = Field(min_length=1)


class CategoryResponse(ApiModel):
    id: str
    store_id: str
    billboard_id: str
    name: str
    created_at: datetime
    updated_at: datetime

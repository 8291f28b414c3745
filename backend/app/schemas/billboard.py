"""Billboard Schemas — label and hosted image URL."""

from datetime import datetime

from pydantic import Field

from app.schemas.common import ApiModel


class BillboardPayload(ApiModel):
    label: str = Field(min_length=1)
    image_url: str = Field(min_length=1)


class BillboardResponse(ApiModel):
    id: str
    store_id: str
    label: str
    image_url: str
    created_at: datetime
    updated_at: datetime

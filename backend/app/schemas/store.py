"""Store Schemas — store name validation and owner-facing responses.

Invariants:
    - StorePayload.name: 1-255 chars
    - StoreDetailResponse.api_url is the public API root the owner wires a storefront to
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import ApiModel


class StorePayload(ApiModel):
    """Store create/rename body."""
    name: str = Field(min_length=1, max_length=255)


class StoreResponse(ApiModel):
    id: str
    name: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class StoreDetailResponse(StoreResponse):
    """Store plus the public API root (`{public_api_url}/api/{store_id}`)."""
    api_url: str

"""Size and Color Schemas — both are a (name, value) pair scoped to a store.

Invariants:
    - name: at least 2 chars; value: at least 1 char (e.g. "M" or "#ff0000")
"""

from datetime import datetime

from pydantic import Field

from app.schemas.common import ApiModel


class AttributePayload(ApiModel):
    """Size or Color create/update body."""
    name: str = Field(min_length=2)
    value: str = Field(min_length=1)


class AttributeResponse(ApiModel):
    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime
    updated_at: datetime


SizePayload = AttributePayload
ColorPayload = AttributePayload
SizeResponse = AttributeResponse
ColorResponse = AttributeResponse

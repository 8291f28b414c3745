"""Store Routes — the caller's own stores.

Invariants:
    - POST answers 201; every other route answers 200
    - All routes need a caller; single-store routes also need ownership
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.infrastructure.database import get_db
from app.infrastructure.identity import get_caller_id
from app.schemas.store import StoreDetailResponse, StorePayload, StoreResponse
from app.services.handle_stores import StoreHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/stores", tags=["stores"])


@router.post(
    "", response_model=StoreResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_store(
    body: StorePayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a store owned by the caller."""
    return await StoreHandlers(db).create_store(caller_id, body)


@router.get("", response_model=list[StoreResponse])
async def list_stores(
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await StoreHandlers(db).list_stores(caller_id)


@router.get("/{store_id}", response_model=StoreDetailResponse)
async def get_store(
    store_id: str,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    """Store details plus the public API root for storefront clients."""
    store = await StoreHandlers(db).get_store(caller_id, store_id)
    base_url = get_settings().public_api_url.rstrip("/")
    return StoreDetailResponse(
        id=store.id,
        name=store.name,
        user_id=store.user_id,
        created_at=store.created_at,
        updated_at=store.updated_at,
        api_url=f"{base_url}/api/{store.id}",
    )


@router.patch("/{store_id}", response_model=StoreResponse)
async def update_store(
    store_id: str,
    body: StorePayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await StoreHandlers(db).update_store(caller_id, store_id, body)


@router.delete("/{store_id}", response_model=StoreResponse)
async def delete_store(
    store_id: str,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete an owned store. Fails while it still has billboards, products, etc."""
    return await StoreHandlers(db).delete_store(caller_id, store_id)

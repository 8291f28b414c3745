"""Billboard Routes — /api/{store_id}/billboards.

Invariants:
    - GETs are public (storefront); POST/PATCH/DELETE run the ownership gate
    - Replaced billboard images are removed from the media host after the response
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_asset_cleanup
from app.config import get_settings
from app.infrastructure.database import get_db
from app.infrastructure.identity import get_caller_id
from app.schemas.billboard import BillboardPayload, BillboardResponse
from app.services.asset_cleanup import AssetCleanup
from app.services.handle_billboards import BillboardHandlers

router = APIRouter(prefix="/api/{store_id}/billboards", tags=["billboards"])


@router.post("", response_model=BillboardResponse)
async def create_billboard(
    store_id: str,
    body: BillboardPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await BillboardHandlers(db).create_billboard(caller_id, store_id, body)


@router.get("", response_model=list[BillboardResponse])
async def list_billboards(store_id: str, db: AsyncSession = Depends(get_db)):
    return await BillboardHandlers(db).list_billboards(store_id)


@router.get("/{billboard_id}", response_model=BillboardResponse)
async def get_billboard(
    store_id: str, billboard_id: str, db: AsyncSession = Depends(get_db),
):
    return await BillboardHandlers(db).get_billboard(store_id, billboard_id)


@router.patch("/{billboard_id}", response_model=BillboardResponse)
async def update_billboard(
    store_id: str,
    billboard_id: str,
    body: BillboardPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
    cleanup: AssetCleanup = Depends(get_asset_cleanup),
):
    """Update label/image; a replaced image is deleted from the media host."""
    return await BillboardHandlers(db, cleanup).update_billboard(
        caller_id, store_id, billboard_id, body,
    )


@router.delete("/{billboard_id}", response_model=BillboardResponse)
async def delete_billboard(
    store_id: str,
    billboard_id: str,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
    cleanup: AssetCleanup = Depends(get_asset_cleanup),
):
    handlers = BillboardHandlers(
        db, cleanup,
        remove_media_on_delete=get_settings().billboard_delete_removes_media,
    )
    return await handlers.delete_billboard(caller_id, store_id, billboard_id)

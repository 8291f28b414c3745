"""Size Routes — /api/{store_id}/sizes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.identity import get_caller_id
from app.schemas.attribute import SizePayload, SizeResponse
from app.services.handle_attributes import size_handlers

router = APIRouter(prefix="/api/{store_id}/sizes", tags=["sizes"])


@router.post("", response_model=SizeResponse)
async def create_size(
    store_id: str,
    body: SizePayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await size_handlers(db).create(caller_id, store_id, body)


@router.get("", response_model=list[SizeResponse])
async def list_sizes(store_id: str, db: AsyncSession = Depends(get_db)):
    return await size_handlers(db).list_all(store_id)


@router.get("/{size_id}", response_model=SizeResponse)
async def get_size(
    store_id: str, size_id: str, db: AsyncSession = Depends(get_db),
):
    return await size_handlers(db).get(store_id, size_id)


@router.patch("/{size_id}", response_model=SizeResponse)
async def update_size(
    store_id: str,
    size_id: str,
    body: SizePayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await size_handlers(db).update(caller_id, store_id, size_id, body)


@router.delete("/{size_id}", response_model=SizeResponse)
async def delete_size(
    store_id: str,
    size_id: str,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await size_handlers(db).delete(caller_id, store_id, size_id)

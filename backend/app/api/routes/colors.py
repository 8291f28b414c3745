"""Color Routes — /api/{store_id}/colors."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.identity import get_caller_id
from app.schemas.attribute import ColorPayload, ColorResponse
from app.services.handle_attributes import color_handlers

router = APIRouter(prefix="/api/{store_id}/colors", tags=["colors"])


@router.post("", response_model=ColorResponse)
async def create_color(
    store_id: str,
    body: ColorPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await color_handlers(db).create(caller_id, store_id, body)


@router.get("", response_model=list[ColorResponse])
async def list_colors(store_id: str, db: AsyncSession = Depends(get_db)):
    return await color_handlers(db).list_all(store_id)


@router.get("/{color_id}", response_model=ColorResponse)
async def get_color(
    store_id: str, color_id: str, db: AsyncSession = Depends(get_db),
):
    return await color_handlers(db).get(store_id, color_id)


@router.patch("/{color_id}", response_model=ColorResponse)
async def update_color(
    store_id: str,
    color_id: str,
    body: ColorPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await color_handlers(db).update(caller_id, store_id, color_id, body)


@router.delete("/{color_id}", response_model=ColorResponse)
async def delete_color(
    store_id: str,
    color_id: str,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await color_handlers(db).delete(caller_id, store_id, color_id)

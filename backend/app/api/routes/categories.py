"""Category Routes — /api/{store_id}/categories."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.identity import get_caller_id
from app.schemas.category import CategoryPayload, CategoryResponse
from app.services.handle_categories import CategoryHandlers

router = APIRouter(prefix="/api/{store_id}/categories", tags=["categories"])


@router.post("", response_model=CategoryResponse)
async def create_category(
    store_id: str,
    body: CategoryPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await CategoryHandlers(db).create_category(caller_id, store_id, body)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(store_id: str, db: AsyncSession = Depends(get_db)):
    return await CategoryHandlers(db).list_categories(store_id)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    store_id: str, category_id: str, db: AsyncSession = Depends(get_db),
):
    return await CategoryHandlers(db).get_category(store_id, category_id)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    store_id: str,
    category_id: str,
    body: CategoryPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await CategoryHandlers(db).update_category(
        caller_id, store_id, category_id, body,
    )


@router.delete("/{category_id}", response_model=CategoryResponse)
async def delete_category(
    store_id: str,
    category_id: str,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await CategoryHandlers(db).delete_category(caller_id, store_id, category_id)

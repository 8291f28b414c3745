"""Product Routes — /api/{store_id}/products.

Invariants:
    - Public listing hides archived products and filters by categoryId, colorId,
      sizeId and isFeatured when given
    - PATCH replaces the whole image gallery; DELETE removes the gallery's assets
      from the media host after the response
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_asset_cleanup
from app.infrastructure.database import get_db
from app.infrastructure.identity import get_caller_id
from app.schemas.product import ProductPayload, ProductResponse
from app.services.asset_cleanup import AssetCleanup
from app.services.handle_products import ProductHandlers

router = APIRouter(prefix="/api/{store_id}/products", tags=["products"])


@router.post("", response_model=ProductResponse)
async def create_product(
    store_id: str,
    body: ProductPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
):
    return await ProductHandlers(db).create_product(caller_id, store_id, body)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    store_id: str,
    category_id: str | None = Query(None, alias="categoryId"),
    color_id: str | None = Query(None, alias="colorId"),
    size_id: str | None = Query(None, alias="sizeId"),
    is_featured: bool | None = Query(None, alias="isFeatured"),
    db: AsyncSession = Depends(get_db),
):
    """Public product listing (archived products excluded)."""
    return await ProductHandlers(db).list_products(
        store_id,
        category_id=category_id,
        color_id=color_id,
        size_id=size_id,
        is_featured=is_featured,
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    store_id: str, product_id: str, db: AsyncSession = Depends(get_db),
):
    return await ProductHandlers(db).get_product(store_id, product_id)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    store_id: str,
    product_id: str,
    body: ProductPayload,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
    cleanup: AssetCleanup = Depends(get_asset_cleanup),
):
    return await ProductHandlers(db, cleanup).update_product(
        caller_id, store_id, product_id, body,
    )


@router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(
    store_id: str,
    product_id: str,
    caller_id: str | None = Depends(get_caller_id),
    db: AsyncSession = Depends(get_db),
    cleanup: AssetCleanup = Depends(get_asset_cleanup),
):
    return await ProductHandlers(db, cleanup).delete_product(
        caller_id, store_id, product_id,
    )

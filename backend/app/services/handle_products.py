"""Product Handlers — CRUD with full replacement of the product's image gallery.

Invariants:
    - category, size and color must belong to the path store (404 otherwise)
    - update: scalar fields set, every Image row deleted, the new list inserted,
      all in one commit; only then are assets no longer referenced scheduled for
      deletion from the media host
    - delete: asset ids collected from the images, product deleted (images cascade),
      commit, then every collected asset scheduled for deletion
    - public listing never returns archived products
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.asset_ids import asset_ids_for, stale_asset_ids
from app.core.domain_types import EntityKind
from app.models.category import Category
from app.models.color import Color
from app.models.image import Image
from app.models.product import Product
from app.models.size import Size
from app.schemas.product import ProductPayload
from app.services.asset_cleanup import AssetCleanup
from app.services.store_gate import gate, require_store_id
from app.services.store_scoped import (
    delete_and_commit, ensure_in_store, get_in_store_or_404,
)

logger = logging.getLogger(__name__)


class ProductHandlers:

    def __init__(self, db: AsyncSession, cleanup: AssetCleanup | None = None):
        self.db = db
        self.cleanup = cleanup

    async def create_product(
        self, caller_id: str | None, store_id: str, payload: ProductPayload,
    ) -> Product:
        store = await gate(self.db, caller_id, store_id)
        await self._ensure_references(payload, store.id)
        product = Product(
            store_id=store.id,
            name=payload.name,
            price=payload.price,
            category_id=payload.category_id,
            size_id=payload.size_id,
            color_id=payload.color_id,
            is_featured=payload.is_featured,
            is_archived=payload.is_archived,
            images=[Image(url=image.url) for image in payload.images],
        )
        self.db.add(product)
        await self.db.commit()
        logger.info(
            "Product created",
            extra={"store_id": store.id, "entity_id": product.id},
        )
        return product

    async def list_products(
        self,
        store_id: str,
        category_id: str | None = None,
        color_id: str | None = None,
        size_id: str | None = None,
        is_featured: bool | None = None,
    ) -> list[Product]:
        require_store_id(store_id)
        query = select(Product).where(
            Product.store_id == store_id, Product.is_archived.is_(False),
        )
        if category_id:
            query = query.where(Product.category_id == category_id)
        if color_id:
            query = query.where(Product.color_id == color_id)
        if size_id:
            query = query.where(Product.size_id == size_id)
        if is_featured is not None:
            query = query.where(Product.is_featured.is_(is_featured))
        result = await self.db.execute(query.order_by(Product.created_at.desc()))
        return list(result.scalars().all())

    async def get_product(self, store_id: str, product_id: str) -> Product:
        require_store_id(store_id)
        return await get_in_store_or_404(
            self.db, Product, EntityKind.PRODUCT, product_id, store_id,
        )

    async def update_product(
        self, caller_id: str | None, store_id: str, product_id: str,
        payload: ProductPayload,
    ) -> Product:
        store = await gate(self.db, caller_id, store_id)
        product = await get_in_store_or_404(
            self.db, Product, EntityKind.PRODUCT, product_id, store.id,
        )
        await self._ensure_references(payload, store.id)

        old_urls = [image.url for image in product.images]
        new_urls = [image.url for image in payload.images]

        product.name = payload.name
        product.price = payload.price
        product.category_id = payload.category_id
        product.size_id = payload.size_id
        product.color_id = payload.color_id
        product.is_featured = payload.is_featured
        product.is_archived = payload.is_archived

        product.images.clear()
        await self.db.flush()
        product.images.extend(Image(url=url) for url in new_urls)
        await self.db.commit()

        self._schedule_cleanup(stale_asset_ids(old_urls, new_urls), store.id, product_id)
        return product

    async def delete_product(
        self, caller_id: str | None, store_id: str, product_id: str,
    ) -> Product:
        store = await gate(self.db, caller_id, store_id)
        product = await get_in_store_or_404(
            self.db, Product, EntityKind.PRODUCT, product_id, store.id,
        )
        asset_ids = asset_ids_for(image.url for image in product.images)
        await delete_and_commit(self.db, product, EntityKind.PRODUCT, store.id)
        logger.info(
            "Product deleted",
            extra={"store_id": store.id, "entity_id": product_id},
        )
        self._schedule_cleanup(asset_ids, store.id, product_id)
        return product

    async def _ensure_references(self, payload: ProductPayload, store_id: str) -> None:
        await ensure_in_store(
            self.db, Category, EntityKind.CATEGORY, payload.category_id, store_id,
        )
        await ensure_in_store(
            self.db, Size, EntityKind.SIZE, payload.size_id, store_id,
        )
        await ensure_in_store(
            self.db, Color, EntityKind.COLOR, payload.color_id, store_id,
        )

    def _schedule_cleanup(self, asset_ids: list[str], store_id: str, product_id: str):
        if self.cleanup:
            self.cleanup.schedule(
                asset_ids, store_id=store_id,
                entity=EntityKind.PRODUCT.value, entity_id=product_id,
            )

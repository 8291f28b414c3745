"""Category Handlers — CRUD for categories and their billboard link.

Invariants:
    - the billboard named by billboard_id must belong to the same store (404 otherwise)
    - delete is blocked while products reference the category
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityKind
from app.models.billboard import Billboard
from app.models.category import Category
from app.schemas.category import CategoryPayload
from app.services.store_gate import gate, require_store_id
from app.services.store_scoped import (
    delete_and_commit, ensure_in_store, get_in_store_or_404,
)

logger = logging.getLogger(__name__)


class CategoryHandlers:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_category(
        self, caller_id: str | None, store_id: str, payload: CategoryPayload,
    ) -> Category:
        store = await gate(self.db, caller_id, store_id)
        await ensure_in_store(
            self.db, Billboard, EntityKind.BILLBOARD, payload.billboard_id, store.id,
        )
        category = Category(
            store_id=store.id, name=payload.name, billboard_id=payload.billboard_id,
        )
        self.db.add(category)
        await self.db.commit()
        logger.info(
            "Category created",
            extra={"store_id": store.id, "entity_id": category.id},
        )
        return category

    async def list_categories(self, store_id: str) -> list[Category]:
        require_store_id(store_id)
        result = await self.db.execute(
            select(Category)
            .where(Category.store_id == store_id)
            .order_by(Category.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get_category(self, store_id: str, category_id: str) -> Category:
        require_store_id(store_id)
        return await get_in_store_or_404(
            self.db, Category, EntityKind.CATEGORY, category_id, store_id,
        )

    async def update_category(
        self, caller_id: str | None, store_id: str, category_id: str,
        payload: CategoryPayload,
    ) -> Category:
        store = await gate(self.db, caller_id, store_id)
        category = await get_in_store_or_404(
            self.db, Category, EntityKind.CATEGORY, category_id, store.id,
        )
        await ensure_in_store(
            self.db, Billboard, EntityKind.BILLBOARD, payload.billboard_id, store.id,
        )
        category.name = payload.name
        category.billboard_id = payload.billboard_id
        await self.db.commit()
        return category

    async def delete_category(
        self, caller_id: str | None, store_id: str, category_id: str,
    ) -> Category:
        store = await gate(self.db, caller_id, store_id)
        category = await get_in_store_or_404(
            self.db, Category, EntityKind.CATEGORY, category_id, store.id,
        )
        await delete_and_commit(self.db, category, EntityKind.CATEGORY, store.id)
        logger.info(
            "Category deleted",
            extra={"store_id": store.id, "entity_id": category_id},
        )
        return category

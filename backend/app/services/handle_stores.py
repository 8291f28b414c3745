"""Store Handlers — create, list, read, rename and delete the caller's stores.

Invariants:
    - create requires a caller and records them as owner
    - every other operation runs the full gate (identity → store id → ownership)
    - delete is blocked (ReferentialIntegrityError) while any store-scoped row exists
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityKind
from app.models.store import Store
from app.schemas.store import StorePayload
from app.services.store_gate import gate, require_caller
from app.services.store_scoped import delete_and_commit

logger = logging.getLogger(__name__)


class StoreHandlers:
    """Owner-side store lifecycle."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_store(self, caller_id: str | None, payload: StorePayload) -> Store:
        user_id = require_caller(caller_id)
        store = Store(name=payload.name, user_id=user_id)
        self.db.add(store)
        await self.db.commit()
        logger.info(
            "Store created", extra={"store_id": store.id, "user_id": user_id},
        )
        return store

    async def list_stores(self, caller_id: str | None) -> list[Store]:
        user_id = require_caller(caller_id)
        result = await self.db.execute(
            select(Store)
            .where(Store.user_id == user_id)
            .order_by(Store.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get_store(self, caller_id: str | None, store_id: str) -> Store:
        return await gate(self.db, caller_id, store_id)

    async def update_store(
        self, caller_id: str | None, store_id: str, payload: StorePayload,
    ) -> Store:
        store = await gate(self.db, caller_id, store_id)
        store.name = payload.name
        await self.db.commit()
        logger.info("Store renamed", extra={"store_id": store.id})
        return store

    async def delete_store(self, caller_id: str | None, store_id: str) -> Store:
        store = await gate(self.db, caller_id, store_id)
        await delete_and_commit(self.db, store, EntityKind.STORE, store.id)
        logger.info("Store deleted", extra={"store_id": store_id})
        return store

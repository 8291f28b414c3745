"""Size and Color Handlers — CRUD for the (name, value) option tables products pick from.

Invariants:
    - one implementation parametrized by model: Size and Color differ only in table
    - delete is blocked while products reference the row
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityKind
from app.models.color import Color
from app.models.size import Size
from app.schemas.attribute import AttributePayload
from app.services.store_gate import gate, require_store_id
from app.services.store_scoped import delete_and_commit, get_in_store_or_404

logger = logging.getLogger(__name__)


class AttributeHandlers:
    """Store-scoped CRUD over Size or Color."""

    def __init__(self, db: AsyncSession, model: type[Size] | type[Color], kind: EntityKind):
        self.db = db
        self.model = model
        self.kind = kind

    async def create(
        self, caller_id: str | None, store_id: str, payload: AttributePayload,
    ):
        store = await gate(self.db, caller_id, store_id)
        row = self.model(store_id=store.id, name=payload.name, value=payload.value)
        self.db.add(row)
        await self.db.commit()
        logger.info(
            f"{self.kind.value} created",
            extra={"store_id": store.id, "entity_id": row.id},
        )
        return row

    async def list_all(self, store_id: str):
        require_store_id(store_id)
        result = await self.db.execute(
            select(self.model)
            .where(self.model.store_id == store_id)
            .order_by(self.model.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get(self, store_id: str, entity_id: str):
        require_store_id(store_id)
        return await get_in_store_or_404(
            self.db, self.model, self.kind, entity_id, store_id,
        )

    async def update(
        self, caller_id: str | None, store_id: str, entity_id: str,
        payload: AttributePayload,
    ):
        store = await gate(self.db, caller_id, store_id)
        row = await get_in_store_or_404(
            self.db, self.model, self.kind, entity_id, store.id,
        )
        row.name = payload.name
        row.value = payload.value
        await self.db.commit()
        return row

    async def delete(self, caller_id: str | None, store_id: str, entity_id: str):
        store = await gate(self.db, caller_id, store_id)
        row = await get_in_store_or_404(
            self.db, self.model, self.kind, entity_id, store.id,
        )
        await delete_and_commit(self.db, row, self.kind, store.id)
        logger.info(
            f"{self.kind.value} deleted",
            extra={"store_id": store.id, "entity_id": entity_id},
        )
        return row


def size_handlers(db: AsyncSession) -> AttributeHandlers:
    return AttributeHandlers(db, Size, EntityKind.SIZE)


def color_handlers(db: AsyncSession) -> AttributeHandlers:
    return AttributeHandlers(db, Color, EntityKind.COLOR)

"""Store-Scoped Lookups — fetch or verify rows that must live in a given store.

Invariants:
    - A row is "found" only when both its id and its store_id match; a row of
      another store is reported exactly like a missing one (404)
    - delete_and_commit maps a blocked delete (FK RESTRICT) to
      ReferentialIntegrityError after rolling back, so the row stays
"""

import logging
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityKind
from app.core.errors import (
    ErrorContext, ReferentialIntegrityError, ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

M = TypeVar("M")


async def get_in_store_or_404(
    db: AsyncSession, model: type[M], kind: EntityKind,
    entity_id: str, store_id: str,
) -> M:
    result = await db.execute(
        select(model).where(model.id == entity_id, model.store_id == store_id),
    )
    row = result.scalar_one_or_none()
    if row is None:
        raise ResourceNotFoundError(
            kind.value, entity_id, ErrorContext(store_id=store_id),
        )
    return row


async def ensure_in_store(
    db: AsyncSession, model: type[M], kind: EntityKind,
    entity_id: str, store_id: str,
) -> None:
    """Raise 404 unless `entity_id` names a `model` row of `store_id`."""
    await get_in_store_or_404(db, model, kind, entity_id, store_id)


async def delete_and_commit(
    db: AsyncSession, row, kind: EntityKind, store_id: str,
) -> None:
    """Delete `row` and commit; dependents still pointing at it abort the delete."""
    # rollback expires `row`, read the id while it is still loaded
    row_id = row.id
    await db.delete(row)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(
            f"{kind.value} delete blocked by dependent rows: {e.orig}",
            extra={"store_id": store_id, "entity": kind.value, "entity_id": row_id},
        )
        raise ReferentialIntegrityError(
            kind.value, row_id, ErrorContext(store_id=store_id),
        )

"""Authorization Gate — identity, store id and ownership checks run by every mutating handler.

Invariants:
    - Order is fixed: caller identity (403) → store id present (400) → ownership (405)
    - Ownership is one SELECT on (stores.id, stores.user_id), re-run on every call;
      nothing is cached between requests
    - A failed check raises before any write is staged on the session

Design Decisions:
    - Plain functions over a dependency: the checks run inside the handler, after
      FastAPI has validated the body, so a malformed payload is rejected with 400
      without ever reaching the gate
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import StoreId, UserId
from app.core.errors import (
    ErrorContext, MissingFieldError, UnauthenticatedError, UnauthorizedError,
)
from app.models.store import Store

logger = logging.getLogger(__name__)


def require_caller(caller_id: str | None) -> UserId:
    """Caller identity or UnauthenticatedError (403)."""
    if not caller_id:
        raise UnauthenticatedError()
    return UserId(caller_id)


def require_store_id(store_id: str | None) -> StoreId:
    """Non-blank store id or MissingFieldError (400)."""
    if not store_id or not store_id.strip():
        raise MissingFieldError("Store id")
    return StoreId(store_id)


async def authorize_store(
    db: AsyncSession, store_id: StoreId, user_id: UserId,
) -> Store:
    """Return the store when `user_id` owns it, else raise UnauthorizedError (405)."""
    result = await db.execute(
        select(Store).where(Store.id == store_id, Store.user_id == user_id),
    )
    store = result.scalar_one_or_none()
    if not store:
        logger.warning(
            "Ownership check failed",
            extra={"store_id": store_id, "user_id": user_id},
        )
        raise UnauthorizedError(ErrorContext(store_id=store_id))
    return store


async def gate(
    db: AsyncSession, caller_id: str | None, store_id: str | None,
) -> Store:
    """Run the full gate: identity, store id, ownership."""
    user_id = require_caller(caller_id)
    checked_store_id = require_store_id(store_id)
    return await authorize_store(db, checked_store_id, user_id)

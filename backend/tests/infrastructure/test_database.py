"""Database Session Manager — driver errors mapped at the session boundary.

Tests:
    - SQLAlchemy errors surface as DatabaseError (500 INTERNAL_ERROR), cause kept for logs
    - StoreAdminError raised inside the block passes through unchanged
    - SQLite connections enforce foreign keys
"""

import pytest
from sqlalchemy import text

from app.core.errors import DatabaseError, UnauthorizedError
from app.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager(tmp_path):
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    yield m
    await m.dispose()


async def test_operational_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    error = exc_info.value
    assert error.http_status == 500
    assert error.code == "INTERNAL_ERROR"
    assert error.operation == "execute"
    assert error.context.debug_info["operation"] == "execute"
    assert "missing_table" not in error.message


async def test_domain_errors_pass_through(manager):
    with pytest.raises(UnauthorizedError):
        async with manager.session():
            raise UnauthorizedError()


async def test_sqlite_foreign_keys_enabled(manager):
    async with manager.session() as db:
        result = await db.execute(text("PRAGMA foreign_keys"))
        assert result.scalar() == 1


async def test_health_check(manager):
    assert await manager.health_check() is True

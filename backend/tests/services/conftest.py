"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with FK enforcement on
    - get_db overridden to use the test DB session
    - get_caller_id overridden: the caller is whatever the X-Test-User header says
      (no header = unauthenticated)
    - get_media_host overridden with FakeMediaHost, which records every deletion batch

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PRAGMA foreign_keys makes
      RESTRICT/CASCADE behave like PostgreSQL
    - Background tasks run before the httpx response returns, so media deletions
      can be asserted right after the request
"""

from decimal import Decimal

import pytest
from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import (
    get_db, enable_sqlite_foreign_keys, DatabaseSessionManager,
)
from app.infrastructure.identity import get_caller_id
from app.infrastructure.media_host import get_media_host
from app.models import Billboard, Category, Color, Image, Product, Size, Store
import app.infrastructure.database as db_module
from app.main import app

from tests.services.helpers import FakeMediaHost, OWNER, STRANGER, asset_url


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def media_host():
    return FakeMediaHost()


@pytest.fixture
async def client(test_engine, test_session_factory, media_host):
    """FastAPI test client with DB, identity and media host overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    async def override_get_caller_id(request: Request) -> str | None:
        return request.headers.get("x-test-user")

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_caller_id] = override_get_caller_id
    app.dependency_overrides[get_media_host] = lambda: media_host

    # Patch db_manager for the readiness probe
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def fetch(test_session_factory):
    """Load a row by id through a fresh session (sees committed API writes)."""
    async def _fetch(model, entity_id):
        async with test_session_factory() as session:
            return await session.get(model, entity_id)
    return _fetch


# -- Seed data -----------------------------------------------------------------


@pytest.fixture
async def store(test_db):
    """A store owned by OWNER."""
    row = Store(name="Main Store", user_id=OWNER)
    test_db.add(row)
    await test_db.commit()
    return row


@pytest.fixture
async def other_store(test_db):
    """A store owned by STRANGER."""
    row = Store(name="Other Store", user_id=STRANGER)
    test_db.add(row)
    await test_db.commit()
    return row


@pytest.fixture
async def billboard(test_db, store):
    row = Billboard(
        store_id=store.id, label="Summer",
        image_url="https://res.cloudinary.com/demo/image/upload/v1688683975/summer01.jpg",
    )
    test_db.add(row)
    await test_db.commit()
    return row


@pytest.fixture
async def category(test_db, store, billboard):
    row = Category(store_id=store.id, billboard_id=billboard.id, name="Shirts")
    test_db.add(row)
    await test_db.commit()
    return row


@pytest.fixture
async def size(test_db, store):
    row = Size(store_id=store.id, name="Medium", value="M")
    test_db.add(row)
    await test_db.commit()
    return row


@pytest.fixture
async def color(test_db, store):
    row = Color(store_id=store.id, name="Red", value="#ff0000")
    test_db.add(row)
    await test_db.commit()
    return row


@pytest.fixture
async def product(test_db, store, category, size, color):
    """A product whose gallery holds assets 'asset_a' and 'asset_b'."""
    row = Product(
        store_id=store.id,
        category_id=category.id,
        size_id=size.id,
        color_id=color.id,
        name="Red Shirt",
        price=Decimal("19.99"),
        images=[Image(url=asset_url("asset_a")), Image(url=asset_url("asset_b"))],
    )
    test_db.add(row)
    await test_db.commit()
    return row

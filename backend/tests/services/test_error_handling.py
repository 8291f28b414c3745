"""Error Handling — structured bodies for domain, validation and unexpected errors."""

from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import get_db
from app.main import app

from tests.services.helpers import OWNER, as_user


async def test_domain_error_body_shape(client, store):
    res = await client.get(f"/api/{store.id}/sizes/missing")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "warning"
    assert error["context"] == {
        "store_id": store.id, "entity": "Size", "entity_id": "missing",
    }
    assert "timestamp" in error


async def test_validation_error_lists_fields(client, store):
    res = await client.post(
        f"/api/{store.id}/products", json={"name": ""}, headers=as_user(OWNER),
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert "body.name" in fields
    assert "body.price" in fields


async def test_unexpected_error_returns_generic_500(client, store):
    async def broken_db():
        raise RuntimeError("connection string with secrets")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get(f"/api/{store.id}/sizes")

    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "secrets" not in res.text


async def test_database_fault_returns_generic_500(tmp_path, monkeypatch):
    """Real get_db path: a driver error becomes the same envelope as any unexpected error."""
    import app.infrastructure.database as db_module
    from app.infrastructure.database import DatabaseSessionManager
    from app.infrastructure.identity import get_caller_id

    # schema never created: every query fails with "no such table"
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    monkeypatch.setattr(db_module, "db_manager", manager)
    app.dependency_overrides[get_caller_id] = lambda: OWNER
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            res = await c.post(
                "/api/some-store/billboards",
                json={"label": "Summer", "imageUrl": "https://host/v1/a.jpg"},
            )
    finally:
        app.dependency_overrides.clear()
        await manager.dispose()

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "An unexpected error occurred"
    assert error["category"] == "internal"
    assert "table" not in res.text

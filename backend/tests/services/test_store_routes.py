"""Store Routes — creation, ownership gate, rename and guarded delete.

Invariants:
    - POST /api/stores returns 201 and records the caller as owner
    - No caller → 403 on every store route, nothing written
    - Caller not owning the store → 405, nothing written
    - A store with dependent rows cannot be deleted
"""

from sqlalchemy import select

from app.models.store import Store
from app.services.store_gate import authorize_store

from tests.services.helpers import OWNER, STRANGER, as_user


async def test_create_store_returns_201_with_caller_as_owner(client, test_db):
    res = await client.post(
        "/api/stores", json={"name": "Shoe Shop"}, headers=as_user(OWNER),
    )
    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "Shoe Shop"
    assert body["userId"] == OWNER

    # ownership check for the new store succeeds for the creator
    store = await authorize_store(test_db, body["id"], OWNER)
    assert store.id == body["id"]


async def test_create_store_without_caller_returns_403(client, test_db):
    res = await client.post("/api/stores", json={"name": "Shoe Shop"})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"

    result = await test_db.execute(select(Store))
    assert result.scalars().all() == []


async def test_create_store_rejects_empty_name(client):
    res = await client.post("/api/stores", json={"name": ""}, headers=as_user(OWNER))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_store_rejects_name_over_255_chars(client):
    res = await client.post(
        "/api/stores", json={"name": "x" * 256}, headers=as_user(OWNER),
    )
    assert res.status_code == 400


async def test_validation_runs_before_identity(client):
    """Malformed body without a caller is a 400, not a 403."""
    res = await client.post("/api/stores", json={})
    assert res.status_code == 400


async def test_list_stores_returns_only_callers_stores(client, store, other_store):
    res = await client.get("/api/stores", headers=as_user(OWNER))
    assert res.status_code == 200
    assert [s["id"] for s in res.json()] == [store.id]


async def test_get_store_includes_public_api_url(client, store):
    res = await client.get(f"/api/stores/{store.id}", headers=as_user(OWNER))
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Main Store"
    assert body["apiUrl"].endswith(f"/api/{store.id}")


async def test_get_store_of_another_owner_returns_405(client, store):
    res = await client.get(f"/api/stores/{store.id}", headers=as_user(STRANGER))
    assert res.status_code == 405


async def test_rename_store(client, store, fetch):
    res = await client.patch(
        f"/api/stores/{store.id}", json={"name": "Renamed"}, headers=as_user(OWNER),
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Renamed"
    assert (await fetch(Store, store.id)).name == "Renamed"


async def test_rename_store_by_stranger_returns_405_and_keeps_name(client, store, fetch):
    res = await client.patch(
        f"/api/stores/{store.id}", json={"name": "Hijacked"}, headers=as_user(STRANGER),
    )
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "UNAUTHORIZED"
    assert (await fetch(Store, store.id)).name == "Main Store"


async def test_rename_store_without_caller_returns_403(client, store, fetch):
    res = await client.patch(f"/api/stores/{store.id}", json={"name": "Renamed"})
    assert res.status_code == 403
    assert (await fetch(Store, store.id)).name == "Main Store"


async def test_blank_store_id_returns_400(client):
    res = await client.patch(
        "/api/stores/%20", json={"name": "Renamed"}, headers=as_user(OWNER),
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Store id is required"


async def test_delete_empty_store(client, store, fetch):
    res = await client.delete(f"/api/stores/{store.id}", headers=as_user(OWNER))
    assert res.status_code == 200
    assert res.json()["id"] == store.id
    assert await fetch(Store, store.id) is None


async def test_delete_store_by_stranger_returns_405(client, store, fetch):
    res = await client.delete(f"/api/stores/{store.id}", headers=as_user(STRANGER))
    assert res.status_code == 405
    assert await fetch(Store, store.id) is not None


async def test_delete_store_with_billboards_is_blocked(client, store, billboard, fetch):
    res = await client.delete(f"/api/stores/{store.id}", headers=as_user(OWNER))
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "REFERENTIAL_INTEGRITY"
    assert await fetch(Store, store.id) is not None

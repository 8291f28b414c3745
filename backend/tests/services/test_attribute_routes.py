"""Size and Color Routes — same CRUD contract over two tables."""

import pytest

from app.models.color import Color
from app.models.size import Size

from tests.services.helpers import OWNER, STRANGER, as_user

RESOURCES = [
    ("sizes", Size, {"name": "Large", "value": "L"}),
    ("colors", Color, {"name": "Blue", "value": "#0000ff"}),
]


@pytest.mark.parametrize("path,model,payload", RESOURCES)
async def test_create_attribute(client, store, fetch, path, model, payload):
    res = await client.post(
        f"/api/{store.id}/{path}", json=payload, headers=as_user(OWNER),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == payload["name"]
    assert body["value"] == payload["value"]
    assert body["storeId"] == store.id
    assert (await fetch(model, body["id"])) is not None


@pytest.mark.parametrize("path,model,payload", RESOURCES)
async def test_create_attribute_without_caller_returns_403(
    client, store, path, model, payload,
):
    res = await client.post(f"/api/{store.id}/{path}", json=payload)
    assert res.status_code == 403
    assert (await client.get(f"/api/{store.id}/{path}")).json() == []


@pytest.mark.parametrize("path", ["sizes", "colors"])
async def test_create_attribute_rejects_short_name_and_empty_value(
    client, store, path,
):
    res = await client.post(
        f"/api/{store.id}/{path}",
        json={"name": "X", "value": ""},
        headers=as_user(OWNER),
    )
    assert res.status_code == 400
    assert len(res.json()["error"]["details"]) == 2


async def test_update_size_by_stranger_returns_405(client, store, size, fetch):
    res = await client.patch(
        f"/api/{store.id}/sizes/{size.id}",
        json={"name": "Small", "value": "S"},
        headers=as_user(STRANGER),
    )
    assert res.status_code == 405
    assert (await fetch(Size, size.id)).value == "M"


async def test_update_color(client, store, color, fetch):
    res = await client.patch(
        f"/api/{store.id}/colors/{color.id}",
        json={"name": "Crimson", "value": "#dc143c"},
        headers=as_user(OWNER),
    )
    assert res.status_code == 200
    row = await fetch(Color, color.id)
    assert (row.name, row.value) == ("Crimson", "#dc143c")


async def test_get_size_of_other_store_returns_404(client, size, other_store):
    res = await client.get(f"/api/{other_store.id}/sizes/{size.id}")
    assert res.status_code == 404


async def test_delete_size_in_use_is_blocked(client, store, size, product, fetch):
    res = await client.delete(
        f"/api/{store.id}/sizes/{size.id}", headers=as_user(OWNER),
    )
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "REFERENTIAL_INTEGRITY"
    assert await fetch(Size, size.id) is not None


async def test_delete_color_in_use_is_blocked(client, store, color, product, fetch):
    res = await client.delete(
        f"/api/{store.id}/colors/{color.id}", headers=as_user(OWNER),
    )
    assert res.status_code == 500
    assert await fetch(Color, color.id) is not None


async def test_delete_unused_color(client, store, color, fetch):
    res = await client.delete(
        f"/api/{store.id}/colors/{color.id}", headers=as_user(OWNER),
    )
    assert res.status_code == 200
    assert res.json()["id"] == color.id
    assert await fetch(Color, color.id) is None

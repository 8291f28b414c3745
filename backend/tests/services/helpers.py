"""Shared helpers for route tests — callers, fake media host, asset URLs."""

OWNER = "user_owner"
STRANGER = "user_stranger"


class FakeMediaHost:
    """Stands in for MediaHostClient; records deletion batches."""

    def __init__(self):
        self.deleted: list[list[str]] = []

    def delete_assets(self, asset_ids):
        self.deleted.append(list(asset_ids))
        return True

    @property
    def deleted_ids(self) -> list[str]:
        return [a for batch in self.deleted for a in batch]


def as_user(user_id: str) -> dict:
    return {"X-Test-User": user_id}


def asset_url(asset_id: str) -> str:
    return f"https://res.cloudinary.com/demo/image/upload/v1/{asset_id}.jpg"

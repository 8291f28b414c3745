"""Asset Ids — media-host public id derivation from stored URLs.

Tests:
    - Id is the last path segment cut at the first "."
    - No extension → segment unchanged
    - Stale ids: referenced before, not referenced after
"""

from app.core.asset_ids import asset_ids_for, extract_asset_id, stale_asset_ids


def test_extract_from_cloudinary_url():
    url = "https://res.cloudinary.com/demo/image/upload/v1688683975/grr2umhhat4adrco7lnc.jpg"
    assert extract_asset_id(url) == "grr2umhhat4adrco7lnc"


def test_extract_short_url():
    assert extract_asset_id("https://host/v1/abcd123.jpg") == "abcd123"


def test_extract_without_extension_keeps_segment():
    assert extract_asset_id("https://host/v1/abcd123") == "abcd123"


def test_extract_cuts_at_first_dot():
    assert extract_asset_id("https://host/v1/photo.final.png") == "photo"


def test_extract_is_deterministic():
    url = "https://host/v1/abcd123.jpg"
    assert extract_asset_id(url) == extract_asset_id(url)


def test_asset_ids_for_dedupes_and_keeps_order():
    urls = [
        "https://host/v1/b.jpg",
        "https://host/v1/a.jpg",
        "https://host/v2/b.png",
        "https://host/v1/",
    ]
    assert asset_ids_for(urls) == ["b", "a"]


def test_stale_asset_ids_returns_only_dropped():
    old = ["https://host/v1/a.jpg", "https://host/v1/b.jpg"]
    new = ["https://host/v1/b.jpg", "https://host/v1/c.jpg"]
    assert stale_asset_ids(old, new) == ["a"]


def test_stale_asset_ids_same_asset_new_version_is_not_stale():
    old = ["https://host/v1/a.jpg"]
    new = ["https://host/v2/a.jpg"]
    assert stale_asset_ids(old, new) == []


def test_stale_asset_ids_empty_new_list_drops_everything():
    old = ["https://host/v1/a.jpg", "https://host/v1/b.jpg"]
    assert stale_asset_ids(old, []) == ["a", "b"]

"""Asset Ids — derive media-host public ids from stored image URLs.

Invariants:
    - Pure and deterministic: no IO, same URL always yields the same id
    - Id = text after the last "/", cut at the first "."
    - A URL without an extension yields its final path segment unchanged

Design Decisions:
    - The id is the only correlation key to the media host's delete API, so the
      transform is deliberately literal (no URL parsing, no query-string handling)
"""

from collections.abc import Iterable

from app.core.domain_types import AssetId


def extract_asset_id(url: str) -> AssetId:
    """Return the media-host asset id embedded in `url`.

    >>> extract_asset_id("https://res.cloudinary.com/demo/image/upload/v1688683975/grr2umhhat4adrco7lnc.jpg")
    'grr2umhhat4adrco7lnc'
    """
    last_segment = url.split("/")[-1]
    return AssetId(last_segment.split(".")[0])


def asset_ids_for(urls: Iterable[str]) -> list[AssetId]:
    """Asset ids for `urls`, first-seen order, duplicates and empty ids dropped."""
    seen: set[str] = set()
    ids: list[AssetId] = []
    for url in urls:
        asset_id = extract_asset_id(url)
        if asset_id and asset_id not in seen:
            seen.add(asset_id)
            ids.append(asset_id)
    return ids


def stale_asset_ids(
    old_urls: Iterable[str], new_urls: Iterable[str],
) -> list[AssetId]:
    """Ids referenced by `old_urls` that no URL in `new_urls` references anymore."""
    still_used = set(asset_ids_for(new_urls))
    return [a for a in asset_ids_for(old_urls) if a not in still_used]

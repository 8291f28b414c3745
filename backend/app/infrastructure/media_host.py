"""Media Host Client — wraps the Cloudinary admin API with retry, backoff, and error mapping.

Invariants:
    - Credentials are passed on every call; cloudinary's global config is never touched
    - Rate limits, GeneralError and errors the SDK raises as bare Exception
      (unmapped HTTP statuses such as 502/504): retried with exponential backoff
    - Client errors (bad request, auth, not allowed): immediate failure, no retry
    - delete_assets() never raises: a failed batch is logged as MediaHostError and
      reported through the return value, the database mutation that scheduled it stands
    - Batches are chunked at 100 public ids (Cloudinary's per-call limit)

Design Decisions:
    - Synchronous, because the SDK is: deletions are scheduled as FastAPI background
      tasks, which Starlette runs in its threadpool after the response is sent
    - ±25% jitter on backoff: prevents synchronized retries across workers
"""

import logging
import random
import time
from collections.abc import Sequence

import cloudinary.api
from cloudinary.exceptions import Error as CloudinaryError, GeneralError, RateLimited

from app.core.errors import MediaHostError

logger = logging.getLogger(__name__)

_MAX_IDS_PER_CALL = 100


class MediaHostClient:
    """Deletes hosted image assets by public id."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        max_retries: int = 3,
        base_delay_ms: int = 500,
        max_delay_ms: int = 10_000,
    ):
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms

    def delete_assets(self, asset_ids: Sequence[str]) -> bool:
        """Delete `asset_ids` from the media host. True when every batch succeeded."""
        ids = [a for a in asset_ids if a]
        if not ids:
            return True
        ok = True
        for start in range(0, len(ids), _MAX_IDS_PER_CALL):
            batch = ids[start:start + _MAX_IDS_PER_CALL]
            try:
                self._delete_batch(batch)
            except MediaHostError as e:
                ok = False
                logger.error(
                    e.message,
                    extra={"error_code": e.code, "asset_ids": batch},
                )
        return ok

    def _delete_batch(self, batch: list[str]) -> dict:
        for attempt in range(self.max_retries + 1):
            try:
                result = cloudinary.api.delete_resources(
                    batch, **self._credentials,
                )
                logger.info(
                    f"Deleted {len(batch)} media asset(s)",
                    extra={"asset_ids": batch, "attempt": attempt},
                )
                return result
            except (RateLimited, GeneralError) as e:
                self._wait_or_give_up(e, batch, attempt)
            except CloudinaryError as e:
                raise MediaHostError(str(e), batch)
            except Exception as e:
                # SDK raises bare Exception for unmapped statuses (502, 504) and config errors
                self._wait_or_give_up(e, batch, attempt)
        raise MediaHostError("retries exhausted", batch)

    def _wait_or_give_up(self, error: Exception, batch: list[str], attempt: int) -> None:
        if attempt >= self.max_retries:
            raise MediaHostError(str(error), batch)
        delay = self._backoff_seconds(attempt)
        logger.warning(
            f"Media host transient error, retrying in {delay:.2f}s: {error}",
            extra={"asset_ids": batch, "attempt": attempt},
        )
        time.sleep(delay)

    def _backoff_seconds(self, attempt: int) -> float:
        delay_ms = min(self.base_delay_ms * (2 ** attempt), self.max_delay_ms)
        jitter = delay_ms * 0.25 * (2 * random.random() - 1)
        return max(0.0, (delay_ms + jitter) / 1000)


# Singleton (initialized on startup)
media_host: MediaHostClient | None = None


def init_media_host(cloud_name: str, api_key: str, api_secret: str, **kwargs):
    global media_host
    media_host = MediaHostClient(cloud_name, api_key, api_secret, **kwargs)


def get_media_host() -> MediaHostClient:
    """FastAPI dependency for the media host client."""
    if not media_host:
        raise RuntimeError("Media host not initialized")
    return media_host

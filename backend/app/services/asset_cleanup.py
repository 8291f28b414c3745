"""Asset Cleanup — schedules media-host deletions to run after the response.

Invariants:
    - schedule() is only called after the database commit succeeded
    - Nothing is scheduled for an empty id list
    - Scheduled work is best effort: MediaHostClient retries, then logs and gives up

Design Decisions:
    - FastAPI BackgroundTasks: no extra infrastructure, deletion runs after the
      response so a slow or failing media host never delays or fails the request
"""

import logging
from collections.abc import Sequence

from fastapi import BackgroundTasks

from app.infrastructure.media_host import MediaHostClient

logger = logging.getLogger(__name__)


class AssetCleanup:
    """Queues asset deletions on the request's background tasks."""

    def __init__(self, background_tasks: BackgroundTasks, media_host: MediaHostClient):
        self.background_tasks = background_tasks
        self.media_host = media_host

    def schedule(self, asset_ids: Sequence[str], **log_extra) -> None:
        ids = [a for a in asset_ids if a]
        if not ids:
            return
        logger.info(
            f"Scheduling deletion of {len(ids)} media asset(s)",
            extra={"asset_ids": ids, **log_extra},
        )
        self.background_tasks.add_task(self.media_host.delete_assets, ids)

"""Route Dependencies — per-request collaborators assembled from the lifespan singletons.

Invariants:
    - get_asset_cleanup binds the request's BackgroundTasks to the shared media host
      client, so scheduled deletions run after this request's response
"""

from fastapi import BackgroundTasks, Depends

from app.infrastructure.media_host import MediaHostClient, get_media_host
from app.services.asset_cleanup import AssetCleanup


def get_asset_cleanup(
    background_tasks: BackgroundTasks,
    media_host: MediaHostClient = Depends(get_media_host),
) -> AssetCleanup:
    return AssetCleanup(background_tasks, media_host)

"""Billboard Handlers — CRUD plus replacement of the billboard's hosted image.

Invariants:
    - update schedules deletion of the previous asset when the stored image_url is
      non-empty and differs from the new one, only after the commit
    - delete leaves the asset on the media host unless remove_media_on_delete is set
    - reads are public; a billboard of another store is 404
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.asset_ids import extract_asset_id
from app.core.domain_types import EntityKind
from app.models.billboard import Billboard
from app.schemas.billboard import BillboardPayload
from app.services.asset_cleanup import AssetCleanup
from app.services.store_gate import gate, require_store_id
from app.services.store_scoped import delete_and_commit, get_in_store_or_404

logger = logging.getLogger(__name__)


class BillboardHandlers:

    def __init__(
        self,
        db: AsyncSession,
        cleanup: AssetCleanup | None = None,
        remove_media_on_delete: bool = False,
    ):
        self.db = db
        self.cleanup = cleanup
        self.remove_media_on_delete = remove_media_on_delete

    async def create_billboard(
        self, caller_id: str | None, store_id: str, payload: BillboardPayload,
    ) -> Billboard:
        store = await gate(self.db, caller_id, store_id)
        billboard = Billboard(
            store_id=store.id, label=payload.label, image_url=payload.image_url,
        )
        self.db.add(billboard)
        await self.db.commit()
        logger.info(
            "Billboard created",
            extra={"store_id": store.id, "entity_id": billboard.id},
        )
        return billboard

    async def list_billboards(self, store_id: str) -> list[Billboard]:
        require_store_id(store_id)
        result = await self.db.execute(
            select(Billboard)
            .where(Billboard.store_id == store_id)
            .order_by(Billboard.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get_billboard(self, store_id: str, billboard_id: str) -> Billboard:
        require_store_id(store_id)
        return await get_in_store_or_404(
            self.db, Billboard, EntityKind.BILLBOARD, billboard_id, store_id,
        )

    async def update_billboard(
        self, caller_id: str | None, store_id: str, billboard_id: str,
        payload: BillboardPayload,
    ) -> Billboard:
        store = await gate(self.db, caller_id, store_id)
        billboard = await get_in_store_or_404(
            self.db, Billboard, EntityKind.BILLBOARD, billboard_id, store.id,
        )
        previous_url = billboard.image_url
        billboard.label = payload.label
        billboard.image_url = payload.image_url
        await self.db.commit()

        if previous_url and previous_url != payload.image_url:
            self._schedule_cleanup([extract_asset_id(previous_url)], store.id, billboard_id)
        return billboard

    async def delete_billboard(
        self, caller_id: str | None, store_id: str, billboard_id: str,
    ) -> Billboard:
        store = await gate(self.db, caller_id, store_id)
        billboard = await get_in_store_or_404(
            self.db, Billboard, EntityKind.BILLBOARD, billboard_id, store.id,
        )
        await delete_and_commit(self.db, billboard, EntityKind.BILLBOARD, store.id)
        logger.info(
            "Billboard deleted",
            extra={"store_id": store.id, "entity_id": billboard_id},
        )
        if self.remove_media_on_delete and billboard.image_url:
            self._schedule_cleanup(
                [extract_asset_id(billboard.image_url)], store.id, billboard_id,
            )
        return billboard

    def _schedule_cleanup(self, asset_ids: list[str], store_id: str, billboard_id: str):
        if self.cleanup:
            self.cleanup.schedule(
                asset_ids, store_id=store_id,
                entity=EntityKind.BILLBOARD.value, entity_id=billboard_id,
            )

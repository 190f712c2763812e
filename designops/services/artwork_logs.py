"""Artwork log operations."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator
from designops.errors import NotFoundError, ValidationError
from designops.models import ArtworkLog, Category, Job
from designops.schemas.artwork_log import ArtworkLogForm
from designops.services.shaping import shape_artwork_log
from designops.services.storage import TableGateway
from designops.services.validation import validate_artwork_log

logger = logging.getLogger(__name__)


class ArtworkLogService:
    """CRUD for artwork logs."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logs = TableGateway(db, ArtworkLog, "artwork_id")
        self.jobs = TableGateway(db, Job, "job_id")

    async def list_logs(
        self,
        category: Category | None = None,
        designer: str | None = None,
        job_id: str | None = None,
    ) -> list[ArtworkLog]:
        return await self.logs.select(
            order_by=ArtworkLog.start_date.desc(),
            category=category,
            designer=designer,
            job_id=job_id,
        )

    async def get(self, artwork_id: int) -> ArtworkLog:
        log = await self.logs.get(artwork_id)
        if log is None:
            raise NotFoundError("Artwork log", artwork_id)
        return log

    async def _validated_row(self, form: ArtworkLogForm) -> dict:
        record = validate_artwork_log(form)
        if record.category != Category.INTERNAL and await self.jobs.get(record.job_id) is None:
            raise ValidationError({"job_id": f"Job '{record.job_id}' does not exist."})
        return shape_artwork_log(record)

    async def create(self, form: ArtworkLogForm, actor: Operator) -> ArtworkLog:
        row = await self._validated_row(form)
        log = await self.logs.insert(row)
        logger.info(
            f"{actor.name} logged artwork {log.artwork_id} '{log.artwork_title}' for {log.designer}"
        )
        return log

    async def update(self, artwork_id: int, form: ArtworkLogForm, actor: Operator) -> ArtworkLog:
        await self.get(artwork_id)
        row = await self._validated_row(form)

        updated = await self.logs.update(row, artwork_id)
        if not updated:
            raise NotFoundError("Artwork log", artwork_id)

        logger.info(f"{actor.name} updated artwork log {artwork_id}")
        return updated[0]

    async def delete(self, artwork_id: int, actor: Operator) -> None:
        await self.get(artwork_id)
        await self.logs.delete(artwork_id)
        logger.info(f"{actor.name} deleted artwork log {artwork_id}")

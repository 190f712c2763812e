"""Job master operations: validate, shape, persist."""

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator
from designops.errors import DuplicateError, NotFoundError, ReferenceInUseError
from designops.models import ArtworkLog, Category, Job
from designops.schemas.job import JobCreate, JobForm, JobUpdate, LeadSubmission
from designops.services.shaping import shape_job
from designops.services.storage import TableGateway
from designops.services.validation import validate_job

logger = logging.getLogger(__name__)


def make_lead_job_id(now: datetime | None = None) -> str:
    """JobID for lead-intake submissions: ``LEAD-<epoch milliseconds>``."""
    now = now or datetime.now(timezone.utc)
    return f"LEAD-{int(now.timestamp() * 1000)}"


class JobService:
    """CRUD for the job master list."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.jobs = TableGateway(db, Job, "job_id")

    async def list_jobs(self, category: Category | None = None) -> list[Job]:
        return await self.jobs.select(order_by=Job.start_date.desc(), category=category)

    async def get(self, job_id: str) -> Job:
        job = await self.jobs.get(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        return job

    async def create(self, form: JobCreate, actor: Operator) -> Job:
        """Create a job under its user-entered JobID.

        Raises:
            ValidationError: Category rules violated
            DuplicateError: JobID already taken
        """
        record = validate_job(form, form.job_id)

        if await self.jobs.get(form.job_id) is not None:
            raise DuplicateError("job_id", form.job_id, f"Job ID '{form.job_id}' already exists.")

        job = await self.jobs.insert(shape_job(record))
        logger.info(f"{actor.name} created job {job.job_id} ({job.category.value})")
        return job

    async def update(self, job_id: str, form: JobUpdate, actor: Operator) -> Job:
        """Replace a job. A category change nulls the previous category's fields."""
        await self.get(job_id)
        record = validate_job(form, job_id)

        row = shape_job(record)
        row.pop("job_id")
        updated = await self.jobs.update(row, job_id)
        if not updated:
            raise NotFoundError("Job", job_id)

        logger.info(f"{actor.name} updated job {job_id} ({record.category.value})")
        return updated[0]

    async def delete(self, job_id: str, actor: Operator) -> None:
        """Delete a job that no artwork log references."""
        await self.get(job_id)

        result = await self.db.execute(
            select(func.count()).select_from(ArtworkLog).where(ArtworkLog.job_id == job_id)
        )
        log_count = result.scalar_one()
        if log_count:
            raise ReferenceInUseError(
                f"Job '{job_id}' is referenced by {log_count} artwork log(s)"
            )

        await self.jobs.delete(job_id)
        logger.info(f"{actor.name} deleted job {job_id}")

    async def submit_lead(self, submission: LeadSubmission) -> Job:
        """Create a Lead job from the public intake form."""
        now = datetime.now(timezone.utc)
        form = JobCreate(
            job_id=make_lead_job_id(now),
            category=Category.LEAD,
            job_title=submission.job_title,
            start_date=now,
            client_name=submission.client_name,
            pic_requester=submission.pic_requester,
            lead_grade=submission.lead_grade,
            custom_brief=submission.custom_brief,
            link_onedrive=submission.link_onedrive,
        )
        record = validate_job(form, form.job_id)

        if await self.jobs.get(form.job_id) is not None:
            raise DuplicateError("job_id", form.job_id, "A lead was submitted at the same instant; retry.")

        job = await self.jobs.insert(shape_job(record))
        logger.info(f"Lead {job.job_id} submitted for client '{submission.client_name}'")
        return job

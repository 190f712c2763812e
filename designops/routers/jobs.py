"""Job Master API router."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator, require_operator
from designops.database import get_db
from designops.models import Category
from designops.schemas.job import JobCreate, JobResponse, JobUpdate
from designops.services.jobs import JobService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new job",
)
async def create_job(
    job_data: JobCreate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
) -> JobResponse:
    """Create a job under a user-entered JobID.

    Fields that do not apply to the selected category are stored as null.

    Raises:
        422: Category rules violated (errors keyed by field)
        409: JobID already exists
    """
    job = await JobService(db).create(job_data, operator)
    return JobResponse.model_validate(job)


@router.get("", response_model=list[JobResponse], summary="List jobs")
async def list_jobs(
    category: Category | None = Query(None, description="Only jobs of this category"),
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
) -> list[JobResponse]:
    """List jobs, newest start date first."""
    jobs = await JobService(db).list_jobs(category)
    return [JobResponse.model_validate(job) for job in jobs]


@router.get("/{job_id:path}", response_model=JobResponse, summary="Get a specific job")
async def get_job(
    job_id: str,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
) -> JobResponse:
    job = await JobService(db).get(job_id)
    return JobResponse.model_validate(job)


@router.put("/{job_id:path}", response_model=JobResponse, summary="Replace a job")
async def update_job(
    job_id: str,
    job_data: JobUpdate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
) -> JobResponse:
    """Replace every editable field of a job.

    The category may change; the record is re-validated and the fields of
    the previous category are nulled.
    """
    job = await JobService(db).update(job_id, job_data, operator)
    return JobResponse.model_validate(job)


@router.delete("/{job_id:path}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a job")
async def delete_job(
    job_id: str,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
) -> None:
    """Delete a job. Refused with 409 while artwork logs reference it."""
    await JobService(db).delete(job_id, operator)

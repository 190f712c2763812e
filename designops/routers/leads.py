"""Public lead intake. No operator key required."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from designops.database import get_db
from designops.schemas.job import JobResponse, LeadSubmission
from designops.services.jobs import JobService

router = APIRouter(prefix="/api/v1/leads", tags=["leads"])


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def submit_lead(
    request: LeadSubmission,
    db: AsyncSession = Depends(get_db),
) -> JobResponse:
    """Create a Lead job with a generated LEAD-<timestamp> JobID."""
    job = await JobService(db).submit_lead(request)
    return JobResponse.model_validate(job)

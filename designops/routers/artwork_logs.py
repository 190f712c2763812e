"""Artwork Log API router."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator, require_operator
from designops.database import get_db
from designops.models import Category
from designops.schemas.artwork_log import ArtworkLogForm, ArtworkLogResponse
from designops.services.artwork_logs import ArtworkLogService

router = APIRouter(prefix="/api/v1/artwork-logs", tags=["artwork-logs"])


@router.post("", response_model=ArtworkLogResponse, status_code=status.HTTP_201_CREATED)
async def create_artwork_log(
    request: ArtworkLogForm,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Log a piece of artwork against a job, or a department for Internal work."""
    log = await ArtworkLogService(db).create(request, operator)
    return ArtworkLogResponse.model_validate(log)


@router.get("", response_model=list[ArtworkLogResponse])
async def list_artwork_logs(
    category: Category | None = Query(None),
    designer: str | None = Query(None),
    job_id: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """List artwork logs with optional filters."""
    logs = await ArtworkLogService(db).list_logs(category=category, designer=designer, job_id=job_id)
    return [ArtworkLogResponse.model_validate(log) for log in logs]


@router.get("/{artwork_id}", response_model=ArtworkLogResponse)
async def get_artwork_log(
    artwork_id: int,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    log = await ArtworkLogService(db).get(artwork_id)
    return ArtworkLogResponse.model_validate(log)


@router.put("/{artwork_id}", response_model=ArtworkLogResponse)
async def update_artwork_log(
    artwork_id: int,
    request: ArtworkLogForm,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Replace an artwork log; switching to or from Internal swaps job/department."""
    log = await ArtworkLogService(db).update(artwork_id, request, operator)
    return ArtworkLogResponse.model_validate(log)


@router.delete("/{artwork_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artwork_log(
    artwork_id: int,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    await ArtworkLogService(db).delete(artwork_id, operator)

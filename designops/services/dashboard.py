"""Aggregate counts for the dashboard."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from designops.models import ArtworkLog, ArtworkType, Designer, Job, ProjectType
from designops.schemas.dashboard import DashboardResponse
from designops.services.department_list import DepartmentListStore


async def _count(db: AsyncSession, model, *conditions) -> int:
    query = select(func.count()).select_from(model)
    for condition in conditions:
        query = query.where(condition)
    result = await db.execute(query)
    return result.scalar_one()


async def _count_by(db: AsyncSession, column) -> dict[str, int]:
    result = await db.execute(
        select(column, func.count()).group_by(column).order_by(func.count().desc())
    )
    counts = {}
    for key, total in result.all():
        # Enum columns come back as members
        counts[getattr(key, "value", key)] = total
    return counts


async def get_dashboard_summary(db: AsyncSession) -> DashboardResponse:
    """Collect every dashboard figure."""
    total_revisions = (
        await db.execute(select(func.coalesce(func.sum(ArtworkLog.revision_count), 0)))
    ).scalar_one()

    departments = await DepartmentListStore(db).departments()

    return DashboardResponse(
        total_jobs=await _count(db, Job),
        open_jobs=await _count(db, Job, Job.end_date.is_(None)),
        jobs_by_category=await _count_by(db, Job.category),
        total_artwork_logs=await _count(db, ArtworkLog),
        artwork_logs_by_category=await _count_by(db, ArtworkLog.category),
        artwork_logs_by_designer=await _count_by(db, ArtworkLog.designer),
        artwork_logs_by_type=await _count_by(db, ArtworkLog.artwork_type),
        total_revisions=int(total_revisions),
        designer_count=await _count(db, Designer),
        artwork_type_count=await _count(db, ArtworkType),
        project_type_count=await _count(db, ProjectType),
        department_count=len(departments),
    )

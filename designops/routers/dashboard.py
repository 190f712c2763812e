"""Dashboard endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator, require_operator
from designops.database import get_db
from designops.schemas.dashboard import DashboardResponse
from designops.services.dashboard import get_dashboard_summary

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
) -> DashboardResponse:
    """Aggregate job, artwork log and master-list counts."""
    return await get_dashboard_summary(db)

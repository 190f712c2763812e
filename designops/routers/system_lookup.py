"""System Lookup endpoints for the shared department list."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator, require_operator
from designops.database import get_db
from designops.schemas.system_lookup import DepartmentListResponse, DepartmentName
from designops.services.department_list import DepartmentListStore

router = APIRouter(prefix="/api/v1/system-lookup", tags=["system-lookup"])


def _response(departments: list[str]) -> DepartmentListResponse:
    return DepartmentListResponse(departments=departments, total=len(departments))


@router.get("/departments", response_model=DepartmentListResponse)
async def list_departments(
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Department names in stored order (empty when never configured)."""
    return _response(await DepartmentListStore(db).departments())


@router.post("/departments", response_model=DepartmentListResponse, status_code=status.HTTP_201_CREATED)
async def add_department(
    request: DepartmentName,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Append a department. 409 if it exists in any letter case."""
    return _response(await DepartmentListStore(db).add(request.name, operator))


@router.put("/departments/{name:path}", response_model=DepartmentListResponse)
async def rename_department(
    name: str,
    request: DepartmentName,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Rename a department in place, keeping its position."""
    return _response(await DepartmentListStore(db).rename(name, request.name, operator))


@router.delete("/departments/{name:path}", response_model=DepartmentListResponse)
async def remove_department(
    name: str,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Remove a department; removing an absent name succeeds unchanged."""
    return _response(await DepartmentListStore(db).remove(name, operator))

"""Project Type Master endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator, require_operator
from designops.database import get_db
from designops.errors import DuplicateError, NotFoundError
from designops.models import ProjectType
from designops.schemas.masters import ProjectTypeCreate, ProjectTypeResponse
from designops.services.storage import TableGateway

router = APIRouter(prefix="/api/v1/project-types", tags=["project-types"])
logger = logging.getLogger(__name__)


def project_types_table(db: AsyncSession) -> TableGateway[ProjectType]:
    return TableGateway(db, ProjectType, "id")


async def _ensure_name_free(table: TableGateway[ProjectType], type_name: str, own_id: UUID | None = None) -> None:
    for existing in await table.select(type_name=type_name):
        if existing.id != own_id:
            raise DuplicateError("type_name", type_name)


@router.post("", response_model=ProjectTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_project_type(
    request: ProjectTypeCreate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    table = project_types_table(db)
    await _ensure_name_free(table, request.type_name)

    project_type = await table.insert(request.model_dump())
    logger.info(f"{operator.name} created project type {project_type.id} '{project_type.type_name}'")
    return project_type


@router.get("", response_model=list[ProjectTypeResponse])
async def list_project_types(
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    return await project_types_table(db).select(order_by=ProjectType.type_name)


@router.patch("/{project_type_id}", response_model=ProjectTypeResponse)
async def rename_project_type(
    project_type_id: UUID,
    request: ProjectTypeCreate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    table = project_types_table(db)
    await _ensure_name_free(table, request.type_name, own_id=project_type_id)

    updated = await table.update({"type_name": request.type_name}, project_type_id)
    if not updated:
        raise NotFoundError("Project type", project_type_id)

    logger.info(f"{operator.name} renamed project type {project_type_id} to '{request.type_name}'")
    return updated[0]


@router.delete("/{project_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project_type(
    project_type_id: UUID,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    deleted = await project_types_table(db).delete(project_type_id)
    if not deleted:
        raise NotFoundError("Project type", project_type_id)
    logger.info(f"{operator.name} deleted project type {project_type_id}")

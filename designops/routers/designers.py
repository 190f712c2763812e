"""Designer Master CRUD endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator, require_operator
from designops.database import get_db
from designops.errors import DuplicateError, NotFoundError, ValidationError
from designops.models import Designer
from designops.schemas.masters import DesignerCreate, DesignerResponse, DesignerUpdate
from designops.services.storage import TableGateway

router = APIRouter(prefix="/api/v1/designers", tags=["designers"])
logger = logging.getLogger(__name__)


def designers_table(db: AsyncSession) -> TableGateway[Designer]:
    return TableGateway(db, Designer, "designer_id")


@router.post("", response_model=DesignerResponse, status_code=status.HTTP_201_CREATED)
async def create_designer(
    request: DesignerCreate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Create a new designer."""
    table = designers_table(db)
    if await table.get(request.designer_id) is not None:
        raise DuplicateError(
            "designer_id", request.designer_id, f"Designer ID '{request.designer_id}' already exists."
        )

    designer = await table.insert(request.model_dump())
    logger.info(f"{operator.name} created designer {designer.designer_id}")
    return designer


@router.get("", response_model=list[DesignerResponse])
async def list_designers(
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """List all designers by name."""
    return await designers_table(db).select(order_by=Designer.designer_name)


@router.get("/{designer_id:path}", response_model=DesignerResponse)
async def get_designer(
    designer_id: str,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    designer = await designers_table(db).get(designer_id)
    if designer is None:
        raise NotFoundError("Designer", designer_id)
    return designer


@router.patch("/{designer_id:path}", response_model=DesignerResponse)
async def update_designer(
    designer_id: str,
    request: DesignerUpdate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Update name, role or status of a designer."""
    # Update only provided fields
    update_data = request.model_dump(exclude_unset=True)
    if "designer_name" in update_data and update_data["designer_name"] is None:
        raise ValidationError({"designer_name": "Designer Name is required."})

    updated = await designers_table(db).update(update_data, designer_id)
    if not updated:
        raise NotFoundError("Designer", designer_id)

    logger.info(f"{operator.name} updated designer {designer_id}: {sorted(update_data)}")
    return updated[0]


@router.delete("/{designer_id:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_designer(
    designer_id: str,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Delete a designer. Artwork logs keep the name as free text."""
    deleted = await designers_table(db).delete(designer_id)
    if not deleted:
        raise NotFoundError("Designer", designer_id)
    logger.info(f"{operator.name} deleted designer {designer_id}")

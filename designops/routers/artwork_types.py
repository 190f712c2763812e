"""Artwork Type Master endpoints. The type name is the key."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator, require_operator
from designops.database import get_db
from designops.errors import DuplicateError, NotFoundError
from designops.models import ArtworkType
from designops.schemas.masters import ArtworkTypeCreate, ArtworkTypeResponse
from designops.services.storage import TableGateway

router = APIRouter(prefix="/api/v1/artwork-types", tags=["artwork-types"])
logger = logging.getLogger(__name__)


def artwork_types_table(db: AsyncSession) -> TableGateway[ArtworkType]:
    return TableGateway(db, ArtworkType, "type_name")


@router.post("", response_model=ArtworkTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_artwork_type(
    request: ArtworkTypeCreate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    table = artwork_types_table(db)
    if await table.get(request.type_name) is not None:
        raise DuplicateError("type_name", request.type_name)

    artwork_type = await table.insert(request.model_dump())
    logger.info(f"{operator.name} created artwork type '{artwork_type.type_name}'")
    return artwork_type


@router.get("", response_model=list[ArtworkTypeResponse])
async def list_artwork_types(
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    return await artwork_types_table(db).select(order_by=ArtworkType.type_name)


@router.patch("/{type_name:path}", response_model=ArtworkTypeResponse)
async def rename_artwork_type(
    type_name: str,
    request: ArtworkTypeCreate,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    """Rename an artwork type. Existing artwork logs keep the old text."""
    table = artwork_types_table(db)
    if request.type_name != type_name and await table.get(request.type_name) is not None:
        raise DuplicateError("type_name", request.type_name)

    updated = await table.update({"type_name": request.type_name}, type_name)
    if not updated:
        raise NotFoundError("Artwork type", type_name)

    logger.info(f"{operator.name} renamed artwork type '{type_name}' to '{request.type_name}'")
    return updated[0]


@router.delete("/{type_name:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artwork_type(
    type_name: str,
    db: AsyncSession = Depends(get_db),
    operator: Operator = Depends(require_operator),
):
    deleted = await artwork_types_table(db).delete(type_name)
    if not deleted:
        raise NotFoundError("Artwork type", type_name)
    logger.info(f"{operator.name} deleted artwork type '{type_name}'")

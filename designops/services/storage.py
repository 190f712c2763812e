"""Table gateway exposing the four storage primitives used by the services.

Each call is its own round trip and commits on success; there is no
transaction spanning several calls.
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from designops.errors import DuplicateError, StorageError
from designops.models.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class TableGateway(Generic[ModelT]):
    """select / insert / update / delete over one table, addressed by one key column."""

    def __init__(self, db: AsyncSession, model: type[ModelT], key: str):
        self.db = db
        self.model = model
        self.key = key
        self.name = model.__tablename__

    @property
    def key_column(self):
        return getattr(self.model, self.key)

    async def select(self, order_by=None, **filters: Any) -> list[ModelT]:
        """Return rows matching all ``column=value`` filters (None filters are skipped)."""
        query = select(self.model)
        for column, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, column) == value)
        if order_by is not None:
            query = query.order_by(order_by)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Failed to select from {self.name}: {e}")
            raise StorageError(f"Failed to load {self.name}: {e}") from e
        return list(result.scalars().all())

    async def get(self, key_value: Any) -> ModelT | None:
        rows = await self.select(**{self.key: key_value})
        return rows[0] if rows else None

    async def insert(self, values: dict[str, Any]) -> ModelT:
        """Insert one row and return it refreshed.

        Raises:
            DuplicateError: If a unique constraint rejects the row
            StorageError: On any other database failure
        """
        row = self.model(**values)
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Insert into {self.name} rejected: {e.orig}")
            raise DuplicateError(self.key, str(values.get(self.key, ""))) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to insert into {self.name}: {e}")
            raise StorageError(f"Failed to insert into {self.name}: {e}") from e

        await self.db.refresh(row)
        return row

    async def update(self, patch: dict[str, Any], key_value: Any) -> list[ModelT]:
        """Apply ``patch`` to the row with ``key == key_value``.

        Returns:
            The updated rows (empty when nothing matched)
        """
        row = await self.get(key_value)
        if row is None:
            return []

        for field, value in patch.items():
            setattr(row, field, value)

        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Update of {self.name} '{key_value}' rejected: {e.orig}")
            field = next(iter(patch), self.key)
            raise DuplicateError(field, str(patch.get(field, key_value))) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to update {self.name} '{key_value}': {e}")
            raise StorageError(f"Failed to update {self.name}: {e}") from e

        await self.db.refresh(row)
        return [row]

    async def delete(self, key_value: Any) -> int:
        """Delete by key. Returns the number of rows removed (0 is not an error)."""
        try:
            result = await self.db.execute(delete(self.model).where(self.key_column == key_value))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to delete from {self.name} '{key_value}': {e}")
            raise StorageError(f"Failed to delete from {self.name}: {e}") from e
        return result.rowcount

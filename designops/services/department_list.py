"""Shared department list stored as one array column in one row.

Every mutation reads the whole array, changes it in memory and writes it
back. The write is conditional on the row version that was read, so a
writer that lost a race sees zero updated rows, re-reads and re-applies its
change instead of silently overwriting the other writer's.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from designops.auth import Operator
from designops.config import settings
from designops.errors import ConcurrentUpdateError, DuplicateError, NotFoundError, StorageError, ValidationError
from designops.models import SystemLookup
from designops.models.base import utcnow

logger = logging.getLogger(__name__)

# The department list lives in this single row
LOOKUP_ROW_ID = 1


def normalize_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError({"name": "Department name is required."})
    return cleaned


def _find_casefold(departments: list[str], name: str, skip: str | None = None) -> str | None:
    target = name.casefold()
    for existing in departments:
        if existing == skip:
            continue
        if existing.casefold() == target:
            return existing
    return None


def add_department(departments: list[str], name: str) -> list[str]:
    """Append ``name`` unless it matches an entry case-insensitively."""
    name = normalize_name(name)
    clash = _find_casefold(departments, name)
    if clash is not None:
        raise DuplicateError("name", name, f"Department '{clash}' already exists.")
    return [*departments, name]


def rename_department(departments: list[str], old: str, new: str) -> list[str]:
    """Replace ``old`` with ``new`` in place, keeping the order."""
    new = normalize_name(new)
    if old not in departments:
        raise NotFoundError("Department", old)
    if new == old:
        return list(departments)

    clash = _find_casefold(departments, new, skip=old)
    if clash is not None:
        raise DuplicateError("name", new, f"Department '{clash}' already exists.")
    return [new if existing == old else existing for existing in departments]


def remove_department(departments: list[str], name: str) -> list[str]:
    """Drop the exact entry ``name``; removing an absent name is a no-op."""
    return [existing for existing in departments if existing != name]


@dataclass(frozen=True)
class Snapshot:
    """What a writer read: the row version (None if no row yet) and the list."""

    version: int | None
    departments: list[str] = field(default_factory=list)


class DepartmentListStore:
    """Read-modify-write access to the department list with a version guard."""

    def __init__(self, db: AsyncSession, retries: int | None = None):
        self.db = db
        self.retries = retries if retries is not None else settings.lookup_write_retries

    async def read(self) -> Snapshot:
        query = (
            select(SystemLookup)
            .where(SystemLookup.id == LOOKUP_ROW_ID)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read department list: {e}")
            raise StorageError(f"Failed to fetch department list: {e}") from e

        row = result.scalar_one_or_none()
        if row is None:
            return Snapshot(version=None, departments=[])
        return Snapshot(version=row.version, departments=list(row.department_list or []))

    async def write(self, snapshot: Snapshot, departments: list[str]) -> bool:
        """Write ``departments`` if the row is still at ``snapshot.version``.

        Returns:
            True if written, False if another writer changed the row first
        """
        try:
            if snapshot.version is None:
                self.db.add(
                    SystemLookup(id=LOOKUP_ROW_ID, department_list=departments, version=1)
                )
                await self.db.commit()
                return True

            result = await self.db.execute(
                update(SystemLookup)
                .where(
                    SystemLookup.id == LOOKUP_ROW_ID,
                    SystemLookup.version == snapshot.version,
                )
                .values(
                    department_list=departments,
                    version=snapshot.version + 1,
                    updated_at=utcnow(),
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                await self.db.rollback()
                return False
            await self.db.commit()
            return True
        except IntegrityError:
            # Another writer created the row first
            await self.db.rollback()
            return False
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to write department list: {e}")
            raise StorageError(f"Failed to save department list: {e}") from e

    async def departments(self) -> list[str]:
        return (await self.read()).departments

    async def _mutate(self, describe: str, mutation: Callable[[list[str]], list[str]]) -> list[str]:
        for attempt in range(1, self.retries + 1):
            snapshot = await self.read()
            updated = mutation(list(snapshot.departments))
            if updated == snapshot.departments:
                return updated
            if await self.write(snapshot, updated):
                return updated
            logger.warning(
                f"Department list changed under {describe} (attempt {attempt}/{self.retries}); retrying"
            )
        raise ConcurrentUpdateError("Department list", self.retries)

    async def add(self, name: str, actor: Operator) -> list[str]:
        departments = await self._mutate(f"add '{name}'", lambda current: add_department(current, name))
        logger.info(f"{actor.name} added department '{name.strip()}'")
        return departments

    async def rename(self, old: str, new: str, actor: Operator) -> list[str]:
        departments = await self._mutate(
            f"rename '{old}'", lambda current: rename_department(current, old, new)
        )
        logger.info(f"{actor.name} renamed department '{old}' to '{new.strip()}'")
        return departments

    async def remove(self, name: str, actor: Operator) -> list[str]:
        departments = await self._mutate(f"remove '{name}'", lambda current: remove_department(current, name))
        logger.info(f"{actor.name} removed department '{name}'")
        return departments

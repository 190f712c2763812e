"""System lookup row holding the shared department list."""

from sqlalchemy import JSON, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class SystemLookup(Base, TimestampMixin):
    """Single row whose ``department_list`` column is an array of names.

    ``version`` is bumped on every write; writers update conditionally on the
    version they read (see services.department_list).
    """

    __tablename__ = "system_lookup"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    department_list: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    def __repr__(self) -> str:
        return f"<SystemLookup(id={self.id}, version={self.version}, departments={len(self.department_list or [])})>"

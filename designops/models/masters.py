"""Flat lookup tables: designers, artwork types and project types.

Names from these tables are copied into jobs and artwork logs as free text,
so there are no foreign keys pointing back here.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class Designer(Base, TimestampMixin):
    """Designer master row."""

    __tablename__ = "designers"

    designer_id: Mapped[str] = mapped_column(String(100), primary_key=True)
    designer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<Designer(id='{self.designer_id}', name='{self.designer_name}')>"


class ArtworkType(Base, TimestampMixin):
    """Artwork type master row, keyed by its name."""

    __tablename__ = "artwork_types"

    type_name: Mapped[str] = mapped_column(String(255), primary_key=True)

    def __repr__(self) -> str:
        return f"<ArtworkType(name='{self.type_name}')>"


class ProjectType(Base, TimestampMixin):
    """Project type master row with a surrogate UUID key."""

    __tablename__ = "project_types"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    type_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<ProjectType(id={self.id}, name='{self.type_name}')>"

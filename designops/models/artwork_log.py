"""Artwork log model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin
from .enums import Category, enum_values


class ArtworkLog(Base, TimestampMixin):
    """One unit of design work, logged against a job or an internal department."""

    __tablename__ = "artwork_logs"

    artwork_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    category: Mapped[Category] = mapped_column(
        Enum(Category, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        index=True,
    )

    # Exactly one of these is set: job_id outside Internal, department inside
    job_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("jobs.job_id"),
        nullable=True,
        index=True,
    )
    requester_department: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Type and designer are free text copied from the master lists
    artwork_type: Mapped[str] = mapped_column(String(255), nullable=False)
    artwork_title: Mapped[str] = mapped_column(String(255), nullable=False)
    designer: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    revision_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<ArtworkLog(id={self.artwork_id}, title='{self.artwork_title}', designer='{self.designer}')>"

"""Job master model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin
from .enums import Category, LeadGrade, enum_values


class Job(Base, TimestampMixin):
    """A job on the master list.

    Only the category fields that apply to ``category`` are populated; the
    record shaper nulls the rest before every insert or update.
    """

    __tablename__ = "jobs"

    # Caller-supplied key (lead intake synthesizes "LEAD-<ms>")
    job_id: Mapped[str] = mapped_column(String(100), primary_key=True)

    category: Mapped[Category] = mapped_column(
        Enum(Category, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        index=True,
    )
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Non-Project requester fields
    requester_department: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    pic_requester: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Project fields
    project_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    pic_project: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Lead fields
    lead_grade: Mapped[Optional[LeadGrade]] = mapped_column(
        Enum(LeadGrade, native_enum=False, length=1, values_callable=enum_values),
        nullable=True,
    )
    client_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    custom_brief: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    link_onedrive: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    def __repr__(self) -> str:
        return f"<Job(job_id='{self.job_id}', category='{self.category}', title='{self.job_title}')>"

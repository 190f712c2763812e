"""Artwork log request/response schemas."""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field

from ..models.enums import Category
from ..utils.date_parser import format_time_spent
from .common import FormModel, Timestamp

# Mutually exclusive reference fields, chosen by category
ARTWORK_LOG_CATEGORY_FIELDS = ("job_id", "requester_department")


class ArtworkLogForm(FormModel):
    """Schema for the artwork log form (create and full update)."""

    category: Category
    job_id: str | None = Field(None, max_length=100)
    requester_department: str | None = Field(
        None,
        max_length=255,
        validation_alias=AliasChoices("requester_department", "dept_requester"),
    )
    artwork_type: str = Field(..., min_length=1, max_length=255)
    artwork_title: str = Field(..., min_length=1, max_length=255)
    designer: str = Field(..., min_length=1, max_length=255)
    start_date: Timestamp
    end_date: Timestamp | None = None
    revision_count: int | None = Field(None, ge=0)
    notes: str | None = None


class _ArtworkLogRecordBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    artwork_type: str
    artwork_title: str
    designer: str
    start_date: datetime
    end_date: datetime | None = None
    revision_count: int | None = Field(None, ge=0)
    notes: str | None = None


class InternalArtworkLog(_ArtworkLogRecordBase):
    """Internal work, requested by a department rather than a job."""

    category: Literal[Category.INTERNAL] = Category.INTERNAL
    requester_department: str


class JobArtworkLog(_ArtworkLogRecordBase):
    """Work done for a job on the master list."""

    category: Literal[Category.PROJECT, Category.LEAD, Category.OTHER]
    job_id: str


ArtworkLogRecord = Annotated[
    Union[InternalArtworkLog, JobArtworkLog],
    Field(discriminator="category"),
]

ARTWORK_LOG_VARIANTS: dict[Category, type[_ArtworkLogRecordBase]] = {
    Category.INTERNAL: InternalArtworkLog,
    Category.PROJECT: JobArtworkLog,
    Category.LEAD: JobArtworkLog,
    Category.OTHER: JobArtworkLog,
}


class ArtworkLogResponse(BaseModel):
    """Schema for artwork log response, including the derived time spent."""

    artwork_id: int
    category: Category
    job_id: str | None = None
    requester_department: str | None = None
    artwork_type: str
    artwork_title: str
    designer: str
    start_date: datetime
    end_date: datetime | None = None
    revision_count: int
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @computed_field
    @property
    def time_spent(self) -> str | None:
        """Duration between start and end; never stored."""
        return format_time_spent(self.start_date, self.end_date)

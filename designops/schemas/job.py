"""Job-related Pydantic schemas.

``JobForm`` is the flat payload the Job Master form submits. After
validation it becomes one variant of the ``JobRecord`` tagged union, which
carries only the fields that apply to its category.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import Category, LeadGrade
from .common import FormModel, Timestamp

# Fields whose presence depends on the category
JOB_CATEGORY_FIELDS = (
    "requester_department",
    "pic_requester",
    "project_type",
    "pic_project",
    "lead_grade",
    "client_name",
    "custom_brief",
    "link_onedrive",
)


class JobForm(FormModel):
    """Schema for the job form (create and full update)."""

    category: Category
    job_title: str = Field(..., min_length=1, max_length=255)
    start_date: Timestamp
    end_date: Timestamp | None = None
    notes: str | None = None

    requester_department: str | None = Field(None, max_length=255)
    pic_requester: str | None = Field(None, max_length=255)
    project_type: str | None = Field(None, max_length=255)
    pic_project: str | None = Field(None, max_length=255)
    lead_grade: LeadGrade | None = None
    client_name: str | None = Field(None, max_length=255)
    custom_brief: str | None = None
    link_onedrive: str | None = Field(None, max_length=1024)


class JobCreate(JobForm):
    """Schema for creating a job; the JobID is entered by the user."""

    job_id: str = Field(..., min_length=1, max_length=100)


class JobUpdate(JobForm):
    """Schema for replacing a job. The category may change."""

    pass


class LeadSubmission(FormModel):
    """Schema for the public lead-intake form."""

    client_name: str = Field(..., min_length=1, max_length=255)
    pic_requester: str = Field(..., min_length=1, max_length=255)
    lead_grade: LeadGrade
    job_title: str = Field(..., min_length=1, max_length=255)
    custom_brief: str | None = None
    link_onedrive: str | None = Field(None, max_length=1024)


# Validated records, one variant per category


class _JobRecordBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    job_id: str
    job_title: str
    start_date: datetime
    end_date: datetime | None = None
    notes: str | None = None


class ProjectJob(_JobRecordBase):
    category: Literal[Category.PROJECT] = Category.PROJECT
    project_type: str
    pic_project: str
    requester_department: str


class LeadJob(_JobRecordBase):
    category: Literal[Category.LEAD] = Category.LEAD
    lead_grade: LeadGrade
    pic_requester: str
    client_name: str | None = None
    custom_brief: str | None = None
    link_onedrive: str | None = None


class InternalJob(_JobRecordBase):
    category: Literal[Category.INTERNAL] = Category.INTERNAL
    requester_department: str
    pic_requester: str | None = None


class OtherJob(_JobRecordBase):
    category: Literal[Category.OTHER] = Category.OTHER
    requester_department: str | None = None
    pic_requester: str | None = None


JobRecord = Annotated[
    Union[ProjectJob, LeadJob, InternalJob, OtherJob],
    Field(discriminator="category"),
]

JOB_VARIANTS: dict[Category, type[_JobRecordBase]] = {
    Category.PROJECT: ProjectJob,
    Category.LEAD: LeadJob,
    Category.INTERNAL: InternalJob,
    Category.OTHER: OtherJob,
}


class JobResponse(BaseModel):
    """Schema for job response with all columns."""

    job_id: str
    category: Category
    job_title: str
    start_date: datetime
    end_date: datetime | None = None
    notes: str | None = None
    requester_department: str | None = None
    pic_requester: str | None = None
    project_type: str | None = None
    pic_project: str | None = None
    lead_grade: LeadGrade | None = None
    client_name: str | None = None
    custom_brief: str | None = None
    link_onedrive: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

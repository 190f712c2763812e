"""Schemas for the shared department list."""

from pydantic import BaseModel, Field

from .common import FormModel


class DepartmentName(FormModel):
    """Body for adding or renaming a department."""

    name: str = Field(..., min_length=1, max_length=255)


class DepartmentListResponse(BaseModel):
    departments: list[str]
    total: int

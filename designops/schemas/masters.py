"""Pydantic schemas for the designer, artwork type and project type masters."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from .common import FormModel


class DesignerCreate(FormModel):
    """Schema for creating a designer."""

    designer_id: str = Field(..., min_length=1, max_length=100)
    designer_name: str = Field(..., min_length=1, max_length=255)
    role: str | None = Field(None, max_length=100)
    status: str | None = Field(None, max_length=50)


class DesignerUpdate(FormModel):
    """Schema for updating a designer (all fields optional, key is fixed)."""

    designer_name: str | None = Field(None, min_length=1, max_length=255)
    role: str | None = Field(None, max_length=100)
    status: str | None = Field(None, max_length=50)


class DesignerResponse(BaseModel):
    designer_id: str
    designer_name: str
    role: str | None
    status: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ArtworkTypeCreate(FormModel):
    """Schema for creating or renaming an artwork type."""

    type_name: str = Field(..., min_length=1, max_length=255)


class ArtworkTypeResponse(BaseModel):
    type_name: str
    created_at: datetime

    class Config:
        from_attributes = True


class ProjectTypeCreate(FormModel):
    """Schema for creating or renaming a project type."""

    type_name: str = Field(..., min_length=1, max_length=255)


class ProjectTypeResponse(BaseModel):
    id: UUID
    type_name: str
    created_at: datetime

    class Config:
        from_attributes = True

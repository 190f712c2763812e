"""Database models for DesignOps."""

from .artwork_log import ArtworkLog
from .base import Base
from .enums import Category, LeadGrade
from .job import Job
from .masters import ArtworkType, Designer, ProjectType
from .system_lookup import SystemLookup

__all__ = [
    "Base",
    "Category",
    "LeadGrade",
    "Job",
    "ArtworkLog",
    "Designer",
    "ArtworkType",
    "ProjectType",
    "SystemLookup",
]

"""Enumerations shared by models and schemas."""

from enum import Enum


class Category(str, Enum):
    """Discriminant selecting which fields of a Job/ArtworkLog are meaningful."""

    PROJECT = "Project"
    LEAD = "Lead"
    INTERNAL = "Internal"
    OTHER = "Other"


class LeadGrade(str, Enum):
    """Ordinal lead classification, only used by Lead jobs."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"


def enum_values(enum_cls) -> list[str]:
    """Persist enum members by value ("Project"), not by name ("PROJECT")."""
    return [member.value for member in enum_cls]

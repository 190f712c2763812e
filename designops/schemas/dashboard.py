"""Dashboard aggregate schemas."""

from pydantic import BaseModel, Field


class DashboardResponse(BaseModel):
    """Aggregate counts shown on the dashboard."""

    total_jobs: int
    open_jobs: int = Field(description="Jobs without an end date")
    jobs_by_category: dict[str, int]

    total_artwork_logs: int
    artwork_logs_by_category: dict[str, int]
    artwork_logs_by_designer: dict[str, int]
    artwork_logs_by_type: dict[str, int]
    total_revisions: int

    designer_count: int
    artwork_type_count: int
    project_type_count: int
    department_count: int

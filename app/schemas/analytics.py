"""Faculty analytics API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FacultyPerformanceResponse(BaseModel):
    """Per-faculty metrics for the requested period."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    faculty_id: int
    faculty_name: str
    faculty_email: str
    department: str | None = None
    tasks_assigned: int
    tasks_completed: int
    tasks_in_progress: int
    tasks_overdue: int
    average_completion_time: float = Field(
        ..., description="Mean days from creation to last update of completed tasks"
    )
    performance_score: float = Field(..., ge=0, le=100)
    last_active_date: datetime | None = None


class PerformanceSummaryResponse(BaseModel):
    """Totals plus one row per faculty member."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    total_faculty: int
    total_tasks_assigned: int
    total_tasks_completed: int
    average_performance_score: float
    faculty_performances: list[FacultyPerformanceResponse] = Field(
        default_factory=list
    )


class TaskTrendResponse(BaseModel):
    """Monthly task counts (month as YYYY-MM)."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    month: str
    assigned: int
    completed: int
    overdue: int

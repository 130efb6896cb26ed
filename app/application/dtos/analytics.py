"""DTOs for faculty analytics (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class AnalyticsPeriod:
    """Half-open reporting window [start_inclusive, end_exclusive) on created_at."""

    start_inclusive: datetime
    end_exclusive: datetime


@dataclass
class FacultyPerformance:
    """Per-faculty task metrics over one analytics period."""

    faculty_id: int
    faculty_name: str
    faculty_email: str
    department: str | None
    tasks_assigned: int
    tasks_completed: int
    tasks_in_progress: int
    tasks_overdue: int
    average_completion_time: float
    performance_score: float
    last_active_date: datetime | None


@dataclass
class PerformanceSummary:
    """Faculty performance rows plus totals for the period."""

    total_faculty: int
    total_tasks_assigned: int
    total_tasks_completed: int
    average_performance_score: float
    faculty_performances: list[FacultyPerformance] = field(default_factory=list)


@dataclass
class TaskTrend:
    """Monthly bucket (YYYY-MM) of assigned / completed / overdue tasks."""

    month: str
    assigned: int = 0
    completed: int = 0
    overdue: int = 0

"""Application DTOs (no ORM dependency)."""

from app.application.dtos.analytics import (
    AnalyticsPeriod,
    FacultyPerformance,
    PerformanceSummary,
    TaskTrend,
)
from app.application.dtos.task import (
    DEFAULT_TASK_PRIORITY,
    CompletionTime,
    FieldViolation,
    TaskCreate,
    TaskResult,
)
from app.application.dtos.user import UserResult

__all__ = [
    "AnalyticsPeriod",
    "CompletionTime",
    "DEFAULT_TASK_PRIORITY",
    "FacultyPerformance",
    "FieldViolation",
    "PerformanceSummary",
    "TaskCreate",
    "TaskResult",
    "TaskTrend",
    "UserResult",
]

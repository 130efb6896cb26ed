"""Application use cases: one entry point per workflow."""

from app.application.use_cases.analytics import (
    GetFacultyPerformanceUseCase,
    GetTaskTrendsUseCase,
)
from app.application.use_cases.tasks import CreateTaskUseCase, TaskQueryService

__all__ = [
    "CreateTaskUseCase",
    "GetFacultyPerformanceUseCase",
    "GetTaskTrendsUseCase",
    "TaskQueryService",
]

"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.interfaces import ITaskRepository, IUserRepository
from app.application.services.task_create_validator import TaskCreateValidator
from app.application.use_cases.analytics import (
    GetFacultyPerformanceUseCase,
    GetTaskTrendsUseCase,
)
from app.application.use_cases.tasks import CreateTaskUseCase, TaskQueryService

__all__ = [
    "CreateTaskUseCase",
    "GetFacultyPerformanceUseCase",
    "GetTaskTrendsUseCase",
    "ITaskRepository",
    "IUserRepository",
    "TaskCreateValidator",
    "TaskQueryService",
]

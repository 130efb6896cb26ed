"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and application
use cases. Routes depend only on these dependencies, not on infra directly.
Repositories are built per request around the request's session.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.analytics import AnalyticsPeriod
from app.application.use_cases.analytics import (
    GetFacultyPerformanceUseCase,
    GetTaskTrendsUseCase,
    resolve_period,
)
from app.application.use_cases.tasks import CreateTaskUseCase, TaskQueryService
from app.core.config import get_settings
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import TaskRepository, UserRepository


# ---- Repositories ----


async def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskRepository:
    """Task repository (read path)."""
    return TaskRepository(db)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository (read path)."""
    return UserRepository(db)


# ---- Use cases ----


async def get_create_task_use_case(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> CreateTaskUseCase:
    """Create-task use case; task and user repos share one transaction."""
    return CreateTaskUseCase(task_repo=TaskRepository(db), user_repo=UserRepository(db))


async def get_task_query_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
) -> TaskQueryService:
    return TaskQueryService(task_repo)


async def get_faculty_performance_use_case(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> GetFacultyPerformanceUseCase:
    """Faculty performance analytics (counts from the task query set)."""
    return GetFacultyPerformanceUseCase(task_repo=task_repo, user_repo=user_repo)


async def get_task_trends_use_case(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
) -> GetTaskTrendsUseCase:
    return GetTaskTrendsUseCase(task_repo)


# ---- Query parameters ----


async def get_analytics_period(
    start_date: Annotated[
        datetime | None,
        Query(alias="startDate", description="Inclusive start (default: window before end)"),
    ] = None,
    end_date: Annotated[
        datetime | None,
        Query(alias="endDate", description="Exclusive end (default: now)"),
    ] = None,
) -> AnalyticsPeriod:
    """Half-open analytics window from query params; defaults from settings."""
    return resolve_period(
        start_date,
        end_date,
        default_days=get_settings().analytics_default_window_days,
    )

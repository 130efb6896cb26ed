"""Analytics use cases: faculty performance and monthly task trends.

Counts come from the task repository's period queries; everything derived
(rates, average completion time, performance score) is computed here.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from app.application.dtos.analytics import (
    AnalyticsPeriod,
    FacultyPerformance,
    PerformanceSummary,
    TaskTrend,
)
from app.domain.enums import TaskStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils import ensure_utc, utc_now

if TYPE_CHECKING:
    from app.application.dtos.task import CompletionTime
    from app.application.dtos.user import UserResult
    from app.application.interfaces.repositories import ITaskRepository, IUserRepository

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86_400
# Weights of completion rate and on-time rate in the 0-100 performance score.
_COMPLETION_WEIGHT = 0.7
_ON_TIME_WEIGHT = 0.3


def resolve_period(
    start: datetime | None,
    end: datetime | None,
    *,
    default_days: int,
    now: datetime | None = None,
) -> AnalyticsPeriod:
    """Build a half-open period; missing end is now, missing start is end - default_days."""
    end_exclusive = ensure_utc(end) or (now or utc_now())
    start_inclusive = ensure_utc(start) or end_exclusive - timedelta(days=default_days)
    if start_inclusive >= end_exclusive:
        raise ValidationException(
            "start_date must be before end_date", field="start_date"
        )
    return AnalyticsPeriod(start_inclusive=start_inclusive, end_exclusive=end_exclusive)


def average_completion_days(pairs: list[CompletionTime]) -> float:
    """Mean of updated_at - created_at in days (2 decimals); 0.0 when there are no pairs."""
    if not pairs:
        return 0.0
    total = sum(p.duration.total_seconds() for p in pairs)
    return round(total / len(pairs) / _SECONDS_PER_DAY, 2)


def performance_score(assigned: int, completed: int, overdue: int) -> float:
    """0-100 score: 70% completion rate plus 30% share of tasks not overdue."""
    if assigned <= 0:
        return 0.0
    completion_rate = min(completed / assigned, 1.0)
    on_time_rate = 1.0 - min(overdue / assigned, 1.0)
    return round(
        100 * (_COMPLETION_WEIGHT * completion_rate + _ON_TIME_WEIGHT * on_time_rate),
        2,
    )


def _month_key(dt: datetime) -> str:
    return dt.strftime("%Y-%m")


def _months_between(start: datetime, end: datetime) -> list[str]:
    """YYYY-MM keys from start's month through end's month, ascending."""
    keys: list[str] = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        keys.append(f"{year:04d}-{month:02d}")
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return keys


class GetFacultyPerformanceUseCase:
    """Per-faculty metrics and summary totals for a period."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.task_repo = task_repo
        self.user_repo = user_repo

    async def _performance_for(
        self, user: UserResult, period: AnalyticsPeriod, now: datetime
    ) -> FacultyPerformance:
        start, end = period.start_inclusive, period.end_exclusive
        assigned = await self.task_repo.count_tasks_assigned_to_user_in_period(
            user.id, start, end
        )
        completed = await self.task_repo.count_tasks_by_user_and_status_in_period(
            user.id, TaskStatus.COMPLETED, start, end
        )
        in_progress = await self.task_repo.count_tasks_by_user_and_status_in_period(
            user.id, TaskStatus.IN_PROGRESS, start, end
        )
        overdue = await self.task_repo.count_overdue_tasks_by_user_in_period(
            user.id, TaskStatus.COMPLETED, now, start, end
        )
        pairs = await self.task_repo.find_completion_times_by_user_in_period(
            user.id, start, end
        )
        return FacultyPerformance(
            faculty_id=user.id,
            faculty_name=user.full_name or user.email,
            faculty_email=user.email,
            department=user.department,
            tasks_assigned=assigned,
            tasks_completed=completed,
            tasks_in_progress=in_progress,
            tasks_overdue=overdue,
            average_completion_time=average_completion_days(pairs),
            performance_score=performance_score(assigned, completed, overdue),
            last_active_date=max((p.updated_at for p in pairs), default=None),
        )

    async def get_performance_summary(
        self,
        period: AnalyticsPeriod,
        department: str | None = None,
        *,
        now: datetime | None = None,
    ) -> PerformanceSummary:
        """Metrics for every active faculty member (optionally one department)."""
        now = now or utc_now()
        faculty = await self.user_repo.list_faculty(department=department)
        rows = [await self._performance_for(u, period, now) for u in faculty]
        logger.debug(
            "Computed performance for %d faculty in [%s, %s)",
            len(rows),
            period.start_inclusive.isoformat(),
            period.end_exclusive.isoformat(),
        )
        average = (
            round(sum(r.performance_score for r in rows) / len(rows), 2) if rows else 0.0
        )
        return PerformanceSummary(
            total_faculty=len(rows),
            total_tasks_assigned=sum(r.tasks_assigned for r in rows),
            total_tasks_completed=sum(r.tasks_completed for r in rows),
            average_performance_score=average,
            faculty_performances=rows,
        )

    async def get_user_performance(
        self,
        user_id: int,
        period: AnalyticsPeriod,
        *,
        now: datetime | None = None,
    ) -> FacultyPerformance:
        """Metrics for one user. Raises ResourceNotFoundException for an unknown user."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return await self._performance_for(user, period, now or utc_now())


class GetTaskTrendsUseCase:
    """Monthly assigned / completed / overdue counts over tasks created in a period."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def get_task_trends(
        self, period: AnalyticsPeriod, *, now: datetime | None = None
    ) -> list[TaskTrend]:
        """One TaskTrend per month touched by the period, ascending; empty months are zero."""
        now = now or utc_now()
        start, end = period.start_inclusive, period.end_exclusive
        buckets = {
            key: TaskTrend(month=key)
            for key in _months_between(start, end - timedelta(microseconds=1))
        }
        tasks = await self.task_repo.find_by_created_at_between(start, end)
        for task in tasks:
            # Trends are half-open like the other analytics; drop the end instant.
            if task.created_at >= end:
                continue
            trend = buckets.setdefault(
                _month_key(task.created_at), TaskTrend(month=_month_key(task.created_at))
            )
            trend.assigned += 1
            if task.status == TaskStatus.COMPLETED:
                trend.completed += 1
            elif task.due_at is not None and task.due_at < now:
                trend.overdue += 1
        return [buckets[k] for k in sorted(buckets)]

"""Task repository: finders and analytics counts over the task table.

Period methods filter on a half-open created_at window
(start_inclusive <= created_at < end_exclusive). The deprecated
count_by_* helpers keep their legacy semantics, including the
closed BETWEEN interval of count_by_user_in_period; do not mix them
with the half-open methods over the same window bounds.
"""

from __future__ import annotations

import logging
import warnings
from datetime import datetime
from typing import Any

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import CompletionTime, TaskCreate, TaskResult
from app.domain.enums import TaskStatus
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils import ensure_utc

logger = logging.getLogger(__name__)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        assigned_to_id=t.assigned_to_id,
        status=t.status,
        priority=t.priority,
        due_at=ensure_utc(t.due_at),
        links=list(t.links or []),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


def _created_in_window(
    start_inclusive: datetime, end_exclusive: datetime
) -> tuple[ColumnElement[bool], ColumnElement[bool]]:
    """Half-open created_at window predicates."""
    return (Task.created_at >= start_inclusive, Task.created_at < end_exclusive)


def _warn_deprecated(name: str, replacement: str) -> None:
    warnings.warn(
        f"TaskRepository.{name} is deprecated; use {replacement}",
        DeprecationWarning,
        stacklevel=3,
    )
    logger.debug("Deprecated task query called: %s", name)


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository. Read methods never raise on no match."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def _on_after_create(self, obj: Task) -> None:
        logger.info(
            "Task created: id=%s assigned_to_id=%s", obj.id, obj.assigned_to_id
        )

    async def _list(self, *criteria: Any) -> list[TaskResult]:
        result = await self.db.execute(
            select(Task).where(*criteria).order_by(Task.id)
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def _count(self, *criteria: Any) -> int:
        result = await self.db.execute(select(func.count(Task.id)).where(*criteria))
        return int(result.scalar_one())

    # ---------- Persistence ----------

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        """Return task by ID, or None."""
        task = await self.get_orm_by_id(task_id)
        return _to_result(task) if task else None

    async def create_task(self, task: TaskCreate) -> TaskResult:
        """Persist a validated TaskCreate (status PENDING) and return the result DTO."""
        orm = Task(
            title=task.title,
            description=task.description,
            due_at=task.due_at,
            assigned_to_id=task.assigned_to_user_id,
            priority=task.effective_priority,
            status=TaskStatus.PENDING,
            links=list(task.links or []),
        )
        created = await self.create(orm)
        return _to_result(created)

    async def list_tasks(self, skip: int = 0, limit: int = 100) -> list[TaskResult]:
        """Return a page of tasks ordered by id."""
        return [_to_result(t) for t in await self.get_all(skip=skip, limit=limit)]

    # ---------- Simple finders ----------

    async def find_by_assigned_to(self, user_id: int) -> list[TaskResult]:
        """Return all tasks assigned to the user, ordered by id."""
        return await self._list(Task.assigned_to_id == user_id)

    async def find_by_assigned_to_and_status(
        self, user_id: int, status: TaskStatus
    ) -> list[TaskResult]:
        """Return the user's tasks with exactly this status."""
        return await self._list(
            Task.assigned_to_id == user_id, Task.status == TaskStatus(status)
        )

    async def find_by_due_at_before_and_status_not(
        self, cutoff: datetime, status: TaskStatus
    ) -> list[TaskResult]:
        """Return tasks with due_at < cutoff and status != status (reminder sweeps).

        Tasks without a due date never match.
        """
        return await self._list(Task.due_at < cutoff, Task.status != TaskStatus(status))

    async def find_by_status(self, status: TaskStatus) -> list[TaskResult]:
        """Return all tasks with exactly this status."""
        return await self._list(Task.status == TaskStatus(status))

    async def find_by_created_at_between(
        self, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Return tasks with start <= created_at <= end (inclusive both ends)."""
        return await self._list(Task.created_at.between(start, end))

    # ---------- Analytics ----------

    async def count_tasks_assigned_to_user_in_period(
        self, user_id: int, start_inclusive: datetime, end_exclusive: datetime
    ) -> int:
        """Count tasks assigned to the user created in [start_inclusive, end_exclusive)."""
        return await self._count(
            Task.assigned_to_id == user_id,
            *_created_in_window(start_inclusive, end_exclusive),
        )

    async def count_tasks_by_user_and_status_in_period(
        self,
        user_id: int,
        status: TaskStatus,
        start_inclusive: datetime,
        end_exclusive: datetime,
    ) -> int:
        """Count the user's tasks with exactly this status, created in the window."""
        return await self._count(
            Task.assigned_to_id == user_id,
            Task.status == TaskStatus(status),
            *_created_in_window(start_inclusive, end_exclusive),
        )

    async def count_overdue_tasks_by_user_in_period(
        self,
        user_id: int,
        completed_status: TaskStatus,
        current_time: datetime,
        start_inclusive: datetime,
        end_exclusive: datetime,
    ) -> int:
        """Count the user's tasks with status != completed_status and due_at < current_time.

        The window only selects which tasks (by created_at) are considered;
        current_time may lie anywhere relative to it.
        """
        return await self._count(
            Task.assigned_to_id == user_id,
            Task.status != TaskStatus(completed_status),
            Task.due_at < current_time,
            *_created_in_window(start_inclusive, end_exclusive),
        )

    async def find_completion_times_by_user_in_period(
        self, user_id: int, start_inclusive: datetime, end_exclusive: datetime
    ) -> list[CompletionTime]:
        """Return (created_at, updated_at) of the user's COMPLETED tasks created in the window.

        No ordering is guaranteed.
        """
        result = await self.db.execute(
            select(Task.created_at, Task.updated_at).where(
                Task.assigned_to_id == user_id,
                Task.status == TaskStatus.COMPLETED,
                *_created_in_window(start_inclusive, end_exclusive),
            )
        )
        return [
            CompletionTime(
                created_at=ensure_utc(created_at),
                updated_at=ensure_utc(updated_at),
            )
            for created_at, updated_at in result.all()
        ]

    # ---------- Older helpers (kept for compatibility) ----------

    async def count_by_assigned_user_id(self, user_id: int) -> int:
        """Deprecated. Count all tasks assigned to the user, any time."""
        _warn_deprecated(
            "count_by_assigned_user_id", "count_tasks_assigned_to_user_in_period"
        )
        return await self._count(Task.assigned_to_id == user_id)

    async def count_by_user_in_period(
        self, user_id: int, start_date: datetime, end_date: datetime
    ) -> int:
        """Deprecated. Count the user's tasks with start_date <= created_at <= end_date.

        Closed interval: a task created exactly at end_date is counted.
        """
        _warn_deprecated(
            "count_by_user_in_period", "count_tasks_assigned_to_user_in_period"
        )
        return await self._count(
            Task.assigned_to_id == user_id,
            Task.created_at.between(start_date, end_date),
        )

    async def count_by_user_and_status(self, user_id: int, status: TaskStatus) -> int:
        """Deprecated. Count the user's tasks with this status, any time."""
        _warn_deprecated(
            "count_by_user_and_status", "count_tasks_by_user_and_status_in_period"
        )
        return await self._count(
            Task.assigned_to_id == user_id, Task.status == TaskStatus(status)
        )

    async def count_by_user_status_and_period(
        self,
        user_id: int,
        status: TaskStatus,
        start_inclusive: datetime,
        end_exclusive: datetime,
    ) -> int:
        """Deprecated alias of count_tasks_by_user_and_status_in_period (half-open)."""
        _warn_deprecated(
            "count_by_user_status_and_period",
            "count_tasks_by_user_and_status_in_period",
        )
        return await self._count(
            Task.assigned_to_id == user_id,
            Task.status == TaskStatus(status),
            *_created_in_window(start_inclusive, end_exclusive),
        )

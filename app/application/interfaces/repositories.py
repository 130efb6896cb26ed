"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from app.domain.enums import TaskStatus

if TYPE_CHECKING:
    from app.application.dtos.task import CompletionTime, TaskCreate, TaskResult
    from app.application.dtos.user import UserResult


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task repository (DIP).

    Period queries use a half-open window on created_at:
    start_inclusive <= created_at < end_exclusive.
    """

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        """Return task by ID."""

    async def create_task(self, task: TaskCreate) -> TaskResult:
        """Persist a validated task and return it."""

    async def list_tasks(self, skip: int = 0, limit: int = 100) -> list[TaskResult]:
        """Return a page of tasks ordered by id."""

    async def find_by_assigned_to(self, user_id: int) -> list[TaskResult]:
        """Return all tasks assigned to the user."""

    async def find_by_assigned_to_and_status(
        self, user_id: int, status: TaskStatus
    ) -> list[TaskResult]:
        """Return the user's tasks with the given status."""

    async def find_by_due_at_before_and_status_not(
        self, cutoff: datetime, status: TaskStatus
    ) -> list[TaskResult]:
        """Return tasks due before cutoff whose status is not the given one."""

    async def find_by_status(self, status: TaskStatus) -> list[TaskResult]:
        """Return all tasks with the given status."""

    async def find_by_created_at_between(
        self, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Return tasks created in [start, end] (inclusive both ends)."""

    async def count_tasks_assigned_to_user_in_period(
        self, user_id: int, start_inclusive: datetime, end_exclusive: datetime
    ) -> int:
        """Count the user's tasks created in the window."""

    async def count_tasks_by_user_and_status_in_period(
        self,
        user_id: int,
        status: TaskStatus,
        start_inclusive: datetime,
        end_exclusive: datetime,
    ) -> int:
        """Count the user's tasks with status created in the window."""

    async def count_overdue_tasks_by_user_in_period(
        self,
        user_id: int,
        completed_status: TaskStatus,
        current_time: datetime,
        start_inclusive: datetime,
        end_exclusive: datetime,
    ) -> int:
        """Count the user's not-completed tasks past due, created in the window."""

    async def find_completion_times_by_user_in_period(
        self, user_id: int, start_inclusive: datetime, end_exclusive: datetime
    ) -> list[CompletionTime]:
        """Return (created_at, updated_at) of the user's completed tasks in the window."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: int) -> UserResult | None:
        """Return user by ID."""

    async def list_faculty(
        self, department: str | None = None
    ) -> list[UserResult]:
        """Return active faculty users, optionally restricted to a department."""

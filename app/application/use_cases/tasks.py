"""Task use cases: create (validated) and read-side lookups."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from app.application.services.task_create_validator import TaskCreateValidator
from app.domain.enums import TaskStatus
from app.domain.exceptions import ResourceNotFoundException, TaskValidationException
from app.shared.utils import utc_now

if TYPE_CHECKING:
    from app.application.dtos.task import TaskCreate, TaskResult
    from app.application.interfaces.repositories import ITaskRepository, IUserRepository

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Validate a TaskCreate, check the assignee exists, then persist."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        user_repo: IUserRepository,
        validator: TaskCreateValidator | None = None,
    ) -> None:
        self.task_repo = task_repo
        self.user_repo = user_repo
        self.validator = validator or TaskCreateValidator()

    async def create_task(self, data: TaskCreate) -> TaskResult:
        """Create the task.

        Raises:
            TaskValidationException: one or more field violations (all reported).
            ResourceNotFoundException: assigned_to_user_id does not exist.
        """
        violations = self.validator.validate(data)
        if violations:
            logger.info("Rejected task creation: %d violation(s)", len(violations))
            raise TaskValidationException(violations)
        if data.assigned_to_user_id is not None:
            assignee = await self.user_repo.get_by_id(data.assigned_to_user_id)
            if assignee is None:
                raise ResourceNotFoundException("user", data.assigned_to_user_id)
        return await self.task_repo.create_task(data)


class TaskQueryService:
    """Read-side task lookups used by the tasks API."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def get_task(self, task_id: int) -> TaskResult:
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    async def list_tasks(
        self, status: TaskStatus | None = None, *, skip: int = 0, limit: int = 100
    ) -> list[TaskResult]:
        """Tasks with the given status, or a page of all tasks when status is None."""
        if status is not None:
            return await self.task_repo.find_by_status(status)
        return await self.task_repo.list_tasks(skip=skip, limit=limit)

    async def list_tasks_for_user(
        self, user_id: int, status: TaskStatus | None = None
    ) -> list[TaskResult]:
        if status is not None:
            return await self.task_repo.find_by_assigned_to_and_status(user_id, status)
        return await self.task_repo.find_by_assigned_to(user_id)

    async def list_overdue(self, cutoff: datetime | None = None) -> list[TaskResult]:
        """Tasks due before cutoff (default now) that are not COMPLETED; for reminder sweeps."""
        return await self.task_repo.find_by_due_at_before_and_status_not(
            cutoff or utc_now(), TaskStatus.COMPLETED
        )

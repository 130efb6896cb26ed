"""DTOs for tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from app.domain.enums import TaskStatus

DEFAULT_TASK_PRIORITY = 3


@dataclass(frozen=True)
class TaskResult:
    """Persisted task as seen by the application layer."""

    id: int
    title: str | None
    description: str | None
    assigned_to_id: int | None
    status: TaskStatus
    priority: int
    due_at: datetime | None
    links: list[str]
    created_at: datetime
    updated_at: datetime


@dataclass
class TaskCreate:
    """Write-model for a new task (mapped from the HTTP request)."""

    title: str | None = None
    description: str | None = None
    due_at: datetime | None = None
    assigned_to_user_id: int | None = None
    priority: int | None = None
    links: list[str] | None = field(default=None)

    @property
    def effective_priority(self) -> int:
        """Priority to persist; falls back to the default when absent."""
        return self.priority if self.priority is not None else DEFAULT_TASK_PRIORITY


@dataclass(frozen=True)
class FieldViolation:
    """One validation failure: field path (e.g. 'links[2]') and message."""

    field: str
    message: str


@dataclass(frozen=True)
class CompletionTime:
    """(created_at, updated_at) pair of a completed task."""

    created_at: datetime
    updated_at: datetime

    @property
    def duration(self) -> timedelta:
        """Time from creation to last update, used as time-to-complete."""
        return self.updated_at - self.created_at

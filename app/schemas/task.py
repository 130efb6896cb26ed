"""Task API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.task import DEFAULT_TASK_PRIORITY, TaskCreate
from app.domain.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for creating a task.

    Only JSON types are checked here; link rules are enforced by
    TaskCreateValidator so every violation is reported together.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    due_at: datetime | None = Field(default=None, alias="dueAt")
    assigned_to_user_id: int | None = Field(default=None, alias="assignedToUserId")
    priority: int | None = Field(
        default=DEFAULT_TASK_PRIORITY, description="Optional; defaults to 3"
    )
    links: list[str] | None = Field(default=None)

    def to_dto(self) -> TaskCreate:
        """Map to the application write-model."""
        return TaskCreate(
            title=self.title,
            description=self.description,
            due_at=self.due_at,
            assigned_to_user_id=self.assigned_to_user_id,
            priority=self.priority,
            links=self.links,
        )


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    title: str | None
    description: str | None
    assigned_to_id: int | None
    status: TaskStatus
    priority: int
    due_at: datetime | None
    links: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class FieldViolationResponse(BaseModel):
    """One rejected field of a task creation request."""

    field: str
    message: str


class TaskValidationDetails(BaseModel):
    violations: list[FieldViolationResponse]


class TaskValidationErrorResponse(BaseModel):
    """422 body returned when a task creation request has field violations."""

    error: str = "TASK_VALIDATION_ERROR"
    message: str
    details: TaskValidationDetails

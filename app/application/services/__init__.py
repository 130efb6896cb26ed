"""Application services: task creation input validation."""

from app.application.services.task_create_validator import (
    MAX_LINK_LENGTH,
    MAX_LINKS,
    TaskCreateValidator,
)

__all__ = [
    "MAX_LINK_LENGTH",
    "MAX_LINKS",
    "TaskCreateValidator",
]

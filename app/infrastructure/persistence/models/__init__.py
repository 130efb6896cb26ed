"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    AuditedModel,
    IntegerIdMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Task",
    "User",
    "AuditedModel",
    "IntegerIdMixin",
    "TimestampMixin",
]

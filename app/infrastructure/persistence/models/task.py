"""Task ORM model. Assigned to exactly one user."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Enum as SAEnum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import TaskStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel


class Task(AuditedModel, Base):
    """Task assigned to a faculty member. Table: task."""

    __tablename__ = "task"

    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    assigned_to_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("app_user.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[TaskStatus] = mapped_column(
        SAEnum(
            TaskStatus,
            name="task_status",
            native_enum=False,
            length=32,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=TaskStatus.PENDING,
    )
    priority: Mapped[int] = mapped_column(
        Integer, nullable=False, default=3, server_default="3"
    )
    due_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    links: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        Index("ix_task_assigned_created", "assigned_to_id", "created_at"),
        Index("ix_task_status_due", "status", "due_at"),
    )

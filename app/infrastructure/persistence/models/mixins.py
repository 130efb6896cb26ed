"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IntegerIdMixin, TimestampMixin, and the combined AuditedModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils import utc_now


def _updated_at_default(context) -> datetime:
    """Start updated_at equal to created_at on insert."""
    return context.get_current_parameters().get("created_at") or utc_now()


class IntegerIdMixin:
    """Mixin for models with an autoincrement integer primary key."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware).

    Set in Python with microsecond precision; the server defaults cover
    raw SQL inserts.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=_updated_at_default,
            server_default=func.now(),
            onupdate=utc_now,
            nullable=False,
        )


class AuditedModel(IntegerIdMixin, TimestampMixin):
    """Combined mixin: integer id + created_at/updated_at. Common for portal models."""

    __abstract__ = True

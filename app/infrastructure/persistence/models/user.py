"""User ORM model (faculty and administrators)."""

from sqlalchemy import Boolean, Enum as SAEnum, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import UserRole
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AuditedModel


class User(AuditedModel, Base):
    """User model. Table: app_user. Unique email."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    department: Mapped[str | None] = mapped_column(
        String(120), nullable=True, index=True
    )
    role: Mapped[UserRole] = mapped_column(
        SAEnum(
            UserRole,
            name="user_role",
            native_enum=False,
            length=16,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=UserRole.FACULTY,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )

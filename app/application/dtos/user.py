"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import UserRole


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, etc.)."""

    id: int
    email: str
    full_name: str | None
    department: str | None
    role: UserRole
    is_active: bool
    created_at: datetime

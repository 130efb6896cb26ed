"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.domain.enums import UserRole
from app.domain.exceptions import UserAlreadyExistsException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        email=u.email,
        full_name=u.full_name,
        department=u.department,
        role=u.role,
        is_active=u.is_active,
        created_at=ensure_utc(u.created_at),
    )


class UserRepository(BaseRepository[User]):
    """User repository. get_by_id, list_faculty, create_user."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: int) -> UserResult | None:
        user = await self.get_orm_by_id(user_id)
        return _user_to_result(user) if user else None

    async def list_faculty(self, department: str | None = None) -> list[UserResult]:
        """Return active FACULTY users ordered by id, optionally filtered by department."""
        stmt = select(User).where(
            User.role == UserRole.FACULTY,
            User.is_active.is_(True),
        )
        if department:
            stmt = stmt.where(User.department == department)
        result = await self.db.execute(stmt.order_by(User.id))
        return [_user_to_result(u) for u in result.scalars().all()]

    async def create_user(
        self,
        email: str,
        *,
        full_name: str | None = None,
        department: str | None = None,
        role: UserRole = UserRole.FACULTY,
    ) -> UserResult:
        """Create a user; raise UserAlreadyExistsException on duplicate email."""
        user = User(
            email=email,
            full_name=full_name,
            department=department,
            role=role,
            is_active=True,
        )
        try:
            created = await self.create(user)
            return _user_to_result(created)
        except IntegrityError:
            raise UserAlreadyExistsException()

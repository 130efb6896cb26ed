"""Base repository: generic reads, create, and a post-create hook."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_orm_by_id, get_all, create and hooks.

    Subclasses override _on_after_create to log or emit events.
    LSP: subclasses are substitutable for BaseRepository.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_orm_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ModelType]:
        """Return records with pagination, ordered by id."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).order_by(model.id).offset(skip).limit(limit)
        )
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and run _on_after_create hook."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to log or emit events."""

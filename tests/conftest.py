"""Pytest configuration and fixtures for the faculty portal.

Uses app.main:app for HTTP tests. Repository and API tests run against an
in-memory SQLite database (aiosqlite) created per test; set
TEST_DATABASE_URL to run them against another async database instead.
"""

import os
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.domain.enums import TaskStatus, UserRole
from app.infrastructure.persistence import models  # noqa: F401
from app.infrastructure.persistence.database import Base, get_db, get_db_transactional
from app.infrastructure.persistence.models import Task, User
from app.main import app

_TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Session on a fresh schema. Rolled back and dropped after the test."""
    engine_kwargs: dict = {}
    if _TEST_DATABASE_URL.startswith("sqlite"):
        engine_kwargs = {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    engine = create_async_engine(_TEST_DATABASE_URL, **engine_kwargs)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app with DB sessions overridden."""

    async def _override_db() -> AsyncIterator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_db] = _override_db
    app.dependency_overrides[get_db_transactional] = _override_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[User]]:
    """Insert a user row; explicit id allowed so tests can use fixed ids."""

    async def _make(
        user_id: int | None = None,
        *,
        email: str | None = None,
        full_name: str | None = None,
        department: str | None = "Computer Science",
        role: UserRole = UserRole.FACULTY,
        is_active: bool = True,
    ) -> User:
        user = User(
            id=user_id,
            email=email or f"faculty-{uuid.uuid4().hex[:12]}@faculty.test",
            full_name=full_name,
            department=department,
            role=role,
            is_active=is_active,
        )
        db_session.add(user)
        await db_session.flush()
        return user

    return _make


@pytest.fixture
def make_task(db_session: AsyncSession) -> Callable[..., Awaitable[Task]]:
    """Insert a task row with explicit audit timestamps (updated_at defaults to created_at)."""

    async def _make(
        *,
        assigned_to_id: int | None,
        created_at: datetime,
        updated_at: datetime | None = None,
        status: TaskStatus = TaskStatus.PENDING,
        due_at: datetime | None = None,
        title: str = "Task",
    ) -> Task:
        task = Task(
            title=title,
            assigned_to_id=assigned_to_id,
            status=status,
            due_at=due_at,
            priority=3,
            links=[],
            created_at=created_at,
            updated_at=updated_at or created_at,
        )
        db_session.add(task)
        await db_session.flush()
        return task

    return _make

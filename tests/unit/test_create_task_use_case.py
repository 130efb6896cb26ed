"""Tests for CreateTaskUseCase and TaskQueryService (mocked repositories)."""

from datetime import UTC, datetime

import pytest

from app.application.dtos.task import TaskCreate, TaskResult
from app.application.dtos.user import UserResult
from app.application.use_cases.tasks import CreateTaskUseCase, TaskQueryService
from app.domain.enums import TaskStatus, UserRole
from app.domain.exceptions import ResourceNotFoundException, TaskValidationException

NOW = datetime(2025, 1, 10, tzinfo=UTC)


def _user(user_id: int = 7) -> UserResult:
    return UserResult(
        id=user_id,
        email="faculty@example.edu",
        full_name="Faculty Member",
        department="Physics",
        role=UserRole.FACULTY,
        is_active=True,
        created_at=NOW,
    )


def _task_result(data: TaskCreate, task_id: int = 1) -> TaskResult:
    return TaskResult(
        id=task_id,
        title=data.title,
        description=data.description,
        assigned_to_id=data.assigned_to_user_id,
        status=TaskStatus.PENDING,
        priority=data.effective_priority,
        due_at=data.due_at,
        links=list(data.links or []),
        created_at=NOW,
        updated_at=NOW,
    )


class MockTaskRepo:
    def __init__(self, tasks: list[TaskResult] | None = None) -> None:
        self.created: list[TaskCreate] = []
        self.tasks = tasks or []
        self.sweep_args: tuple | None = None

    async def create_task(self, task: TaskCreate) -> TaskResult:
        self.created.append(task)
        return _task_result(task)

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    async def find_by_due_at_before_and_status_not(self, cutoff, status):
        self.sweep_args = (cutoff, status)
        return self.tasks


class MockUserRepo:
    def __init__(self, users: list[UserResult] | None = None) -> None:
        self.users = {u.id: u for u in users or []}

    async def get_by_id(self, user_id: int) -> UserResult | None:
        return self.users.get(user_id)


async def test_valid_input_is_persisted() -> None:
    task_repo = MockTaskRepo()
    use_case = CreateTaskUseCase(task_repo, MockUserRepo([_user(7)]))
    data = TaskCreate(title="Grade exams", assigned_to_user_id=7, links=["https://a.b"])

    result = await use_case.create_task(data)

    assert task_repo.created == [data]
    assert result.priority == 3
    assert result.assigned_to_id == 7


async def test_violations_raise_and_nothing_is_persisted() -> None:
    task_repo = MockTaskRepo()
    use_case = CreateTaskUseCase(task_repo, MockUserRepo([_user(7)]))
    data = TaskCreate(assigned_to_user_id=7, links=["ftp://x", "https://ok"])

    with pytest.raises(TaskValidationException) as exc_info:
        await use_case.create_task(data)

    exc = exc_info.value
    assert exc.error_code == "TASK_VALIDATION_ERROR"
    assert [v.field for v in exc.violations] == ["links[0]"]
    assert exc.details["violations"][0]["field"] == "links[0]"
    assert task_repo.created == []


async def test_unknown_assignee_raises_not_found() -> None:
    use_case = CreateTaskUseCase(MockTaskRepo(), MockUserRepo())
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await use_case.create_task(TaskCreate(assigned_to_user_id=99))
    assert exc_info.value.details == {"resource_type": "user", "resource_id": 99}


async def test_get_task_missing_raises_not_found() -> None:
    service = TaskQueryService(MockTaskRepo())
    with pytest.raises(ResourceNotFoundException):
        await service.get_task(1)


async def test_list_overdue_excludes_completed_status() -> None:
    task_repo = MockTaskRepo()
    service = TaskQueryService(task_repo)
    await service.list_overdue(NOW)
    assert task_repo.sweep_args == (NOW, TaskStatus.COMPLETED)

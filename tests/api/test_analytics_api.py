"""Analytics API tests over the per-test database."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient

from app.domain.enums import TaskStatus

JAN_1 = datetime(2025, 1, 1, tzinfo=UTC)
JAN_15 = datetime(2025, 1, 15, tzinfo=UTC)
FEB_1 = datetime(2025, 2, 1, tzinfo=UTC)
WINDOW = {"startDate": "2025-01-01T00:00:00Z", "endDate": "2025-02-01T00:00:00Z"}


async def _seed(make_user, make_task) -> None:
    await make_user(7, full_name="Grace Hopper", department="Computer Science")
    await make_user(8, full_name="Emmy Noether", department="Mathematics")
    await make_task(
        assigned_to_id=7,
        created_at=JAN_1,
        updated_at=JAN_1 + timedelta(days=4),
        status=TaskStatus.COMPLETED,
    )
    await make_task(
        assigned_to_id=7,
        created_at=JAN_15,
        due_at=datetime(2025, 1, 20, tzinfo=UTC),
        status=TaskStatus.IN_PROGRESS,
    )
    await make_task(assigned_to_id=7, created_at=FEB_1, status=TaskStatus.COMPLETED)


async def test_faculty_performance_summary(client: AsyncClient, make_user, make_task) -> None:
    await _seed(make_user, make_task)

    response = await client.get("/api/v1/analytics/faculty-performance", params=WINDOW)

    assert response.status_code == 200
    body = response.json()
    assert body["totalFaculty"] == 2
    assert body["totalTasksAssigned"] == 2
    assert body["totalTasksCompleted"] == 1
    grace = next(r for r in body["facultyPerformances"] if r["facultyId"] == 7)
    assert grace["facultyName"] == "Grace Hopper"
    assert grace["tasksAssigned"] == 2
    assert grace["tasksCompleted"] == 1
    assert grace["tasksInProgress"] == 1
    assert grace["tasksOverdue"] == 1
    assert grace["averageCompletionTime"] == 4.0


async def test_faculty_performance_department_filter(
    client: AsyncClient, make_user, make_task
) -> None:
    await _seed(make_user, make_task)
    response = await client.get(
        "/api/v1/analytics/faculty-performance",
        params={**WINDOW, "department": "Mathematics"},
    )
    body = response.json()
    assert body["totalFaculty"] == 1
    assert body["facultyPerformances"][0]["facultyId"] == 8
    assert body["facultyPerformances"][0]["tasksAssigned"] == 0


async def test_user_performance_and_unknown_user(
    client: AsyncClient, make_user, make_task
) -> None:
    await _seed(make_user, make_task)

    found = await client.get("/api/v1/analytics/faculty-performance/7", params=WINDOW)
    assert found.status_code == 200
    assert found.json()["tasksAssigned"] == 2

    missing = await client.get("/api/v1/analytics/faculty-performance/999", params=WINDOW)
    assert missing.status_code == 404


async def test_inverted_window_is_rejected(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/analytics/task-trends",
        params={"startDate": "2025-02-01T00:00:00Z", "endDate": "2025-01-01T00:00:00Z"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_task_trends(client: AsyncClient, make_user, make_task) -> None:
    await _seed(make_user, make_task)

    response = await client.get("/api/v1/analytics/task-trends", params=WINDOW)

    assert response.status_code == 200
    assert response.json() == [
        {"month": "2025-01", "assigned": 2, "completed": 1, "overdue": 1}
    ]


async def test_user_performance_uses_camel_case_keys_and_offset_window(
    client: AsyncClient, make_user, make_task
) -> None:
    """A +05:00 start equal to midnight UTC keeps the Jan 1 task and drops the Feb 1 task."""
    await _seed(make_user, make_task)

    response = await client.get(
        "/api/v1/analytics/faculty-performance/7",
        params={"startDate": "2025-01-01T05:00:00+05:00", "endDate": "2025-02-01T00:00:00Z"},
    )

    body = response.json()
    assert body["facultyId"] == 7
    assert body["facultyEmail"]
    assert body["tasksAssigned"] == 2
    assert body["tasksCompleted"] == 1
    assert "performanceScore" in body
    assert "lastActiveDate" in body
    assert "tasks_assigned" not in body

"""Tasks API: create, list, lookup, and overdue sweep."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.dependencies import get_create_task_use_case, get_task_query_service
from app.application.use_cases.tasks import CreateTaskUseCase, TaskQueryService
from app.domain.enums import TaskStatus
from app.schemas.task import TaskCreateRequest, TaskResponse, TaskValidationErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": TaskValidationErrorResponse}},
)
async def create_task(
    body: TaskCreateRequest,
    use_case: Annotated[CreateTaskUseCase, Depends(get_create_task_use_case)],
):
    """Create a task. Link violations are all returned together with 422."""
    return await use_case.create_task(body.to_dto())


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    service: Annotated[TaskQueryService, Depends(get_task_query_service)],
    task_status: Annotated[TaskStatus | None, Query(alias="status")] = None,
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
):
    """List tasks, optionally by status."""
    return await service.list_tasks(task_status, skip=skip, limit=limit)


@router.get("/overdue", response_model=list[TaskResponse])
async def list_overdue_tasks(
    service: Annotated[TaskQueryService, Depends(get_task_query_service)],
    cutoff: Annotated[datetime | None, Query(description="Default: now")] = None,
):
    """Tasks due before cutoff that are not COMPLETED (reminder / escalation sweep)."""
    return await service.list_overdue(cutoff)


@router.get("/by-user/{user_id}", response_model=list[TaskResponse])
async def list_tasks_for_user(
    user_id: int,
    service: Annotated[TaskQueryService, Depends(get_task_query_service)],
    task_status: Annotated[TaskStatus | None, Query(alias="status")] = None,
):
    """Tasks assigned to a user, optionally by status. Unknown user yields []."""
    return await service.list_tasks_for_user(user_id, task_status)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    service: Annotated[TaskQueryService, Depends(get_task_query_service)],
):
    return await service.get_task(task_id)

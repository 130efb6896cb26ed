"""Analytics API: faculty performance and task trends."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import (
    get_analytics_period,
    get_faculty_performance_use_case,
    get_task_trends_use_case,
)
from app.application.dtos.analytics import AnalyticsPeriod
from app.application.use_cases.analytics import (
    GetFacultyPerformanceUseCase,
    GetTaskTrendsUseCase,
)
from app.schemas.analytics import (
    FacultyPerformanceResponse,
    PerformanceSummaryResponse,
    TaskTrendResponse,
)

router = APIRouter()


@router.get("/faculty-performance", response_model=PerformanceSummaryResponse)
async def get_faculty_performance(
    period: Annotated[AnalyticsPeriod, Depends(get_analytics_period)],
    use_case: Annotated[
        GetFacultyPerformanceUseCase, Depends(get_faculty_performance_use_case)
    ],
    department: Annotated[str | None, Query()] = None,
):
    """Performance of every active faculty member over [startDate, endDate)."""
    return await use_case.get_performance_summary(period, department=department)


@router.get(
    "/faculty-performance/{user_id}", response_model=FacultyPerformanceResponse
)
async def get_user_performance(
    user_id: int,
    period: Annotated[AnalyticsPeriod, Depends(get_analytics_period)],
    use_case: Annotated[
        GetFacultyPerformanceUseCase, Depends(get_faculty_performance_use_case)
    ],
):
    """Performance of one user; 404 if the user does not exist."""
    return await use_case.get_user_performance(user_id, period)


@router.get("/task-trends", response_model=list[TaskTrendResponse])
async def get_task_trends(
    period: Annotated[AnalyticsPeriod, Depends(get_analytics_period)],
    use_case: Annotated[GetTaskTrendsUseCase, Depends(get_task_trends_use_case)],
):
    """Monthly assigned / completed / overdue counts over [startDate, endDate)."""
    return await use_case.get_task_trends(period)

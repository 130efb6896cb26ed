"""Pydantic request/response schemas for the API."""

from app.schemas.analytics import (
    FacultyPerformanceResponse,
    PerformanceSummaryResponse,
    TaskTrendResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.task import (
    FieldViolationResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskValidationErrorResponse,
)

__all__ = [
    "FacultyPerformanceResponse",
    "FieldViolationResponse",
    "HealthResponse",
    "PerformanceSummaryResponse",
    "TaskCreateRequest",
    "TaskResponse",
    "TaskTrendResponse",
    "TaskValidationErrorResponse",
]

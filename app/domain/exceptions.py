"""Domain exceptions for the faculty portal.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.application.dtos.task import FieldViolation


class FacultyPortalException(Exception):
    """Base exception for all faculty portal errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FacultyPortalException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class TaskValidationException(FacultyPortalException):
    """Raised at the use-case boundary when a task creation input has violations."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = list(violations)
        super().__init__(
            "Task creation input is invalid",
            "TASK_VALIDATION_ERROR",
            {
                "violations": [
                    {"field": v.field, "message": v.message} for v in self.violations
                ]
            },
        )


class ResourceNotFoundException(FacultyPortalException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserAlreadyExistsException(FacultyPortalException):
    """Raised when creating a user whose email is already registered."""

    def __init__(self) -> None:
        super().__init__(
            "Email already registered",
            "USER_ALREADY_EXISTS",
            {},
        )


class SqlNotConfiguredException(FacultyPortalException):
    """Raised when an operation requires the SQL database but DATABASE_URL is unset."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )

"""Tests for domain exceptions (error_code, message, details)."""

from app.application.dtos.task import FieldViolation
from app.domain.exceptions import (
    FacultyPortalException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TaskValidationException,
    UserAlreadyExistsException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = FacultyPortalException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "FacultyPortalException"
    assert exc.details == {}


def test_base_exception_to_dict() -> None:
    exc = FacultyPortalException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="startDate")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "startDate"}
    assert ValidationException("Invalid").details == {}


def test_task_validation_exception_lists_violations() -> None:
    violations = [
        FieldViolation("links", "Up to 50 links allowed"),
        FieldViolation("links[3]", "Links must start with http:// or https://"),
    ]
    exc = TaskValidationException(violations)
    assert exc.error_code == "TASK_VALIDATION_ERROR"
    assert exc.violations == violations
    assert exc.details["violations"][1] == {
        "field": "links[3]",
        "message": "Links must start with http:// or https://",
    }


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("task", 42)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "task not found: 42"
    assert exc.details == {"resource_type": "task", "resource_id": 42}


def test_user_already_exists_exception() -> None:
    assert UserAlreadyExistsException().error_code == "USER_ALREADY_EXISTS"


def test_sql_not_configured_exception() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"

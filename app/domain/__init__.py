"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import TaskStatus, UserRole
from app.domain.exceptions import (
    FacultyPortalException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TaskValidationException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskStatus",
    "UserRole",
    # Exceptions
    "FacultyPortalException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "TaskValidationException",
    "ValidationException",
]

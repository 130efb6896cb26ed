"""Domain enumerations for the faculty portal.

Enums represent fixed sets of domain values (task status, user role).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    COMPLETED is terminal: completion-time and overdue queries key off it.
    """

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    SUBMITTED = "SUBMITTED"
    COMPLETED = "COMPLETED"
    OVERDUE = "OVERDUE"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]


class UserRole(str, Enum):
    """Portal user role. Analytics are computed for FACULTY users only.

    HOD is the head of department who assigns and reviews faculty tasks.
    """

    ADMIN = "ADMIN"
    HOD = "HOD"
    FACULTY = "FACULTY"

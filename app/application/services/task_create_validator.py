"""Field-level validation of task creation input (links rules).

Only the links field carries rules; title, description, due_at,
assigned_to_user_id and priority are accepted as given.
"""

from __future__ import annotations

import re

from app.application.dtos.task import FieldViolation, TaskCreate

MAX_LINKS = 50
MAX_LINK_LENGTH = 2048
# Whole-string match; '.' does not cross a newline.
_LINK_RE = re.compile(r"^(https?://).*$")

LINKS_SIZE_MESSAGE = f"Up to {MAX_LINKS} links allowed"
LINK_LENGTH_MESSAGE = f"Each link must be ≤ {MAX_LINK_LENGTH} characters"
LINK_SCHEME_MESSAGE = "Links must start with http:// or https://"


def _link_violations(index: int, link: str) -> list[FieldViolation]:
    """Return length and scheme violations for one link (both may apply)."""
    field = f"links[{index}]"
    found: list[FieldViolation] = []
    if len(link) > MAX_LINK_LENGTH:
        found.append(FieldViolation(field, LINK_LENGTH_MESSAGE))
    if not _LINK_RE.fullmatch(link):
        found.append(FieldViolation(field, LINK_SCHEME_MESSAGE))
    return found


class TaskCreateValidator:
    """Checks a TaskCreate and reports every violation instead of stopping at the first."""

    def validate(self, task: TaskCreate) -> list[FieldViolation]:
        """Return the list of violations; empty list means the input is valid."""
        if task.links is None:
            return []
        violations: list[FieldViolation] = []
        if len(task.links) > MAX_LINKS:
            violations.append(FieldViolation("links", LINKS_SIZE_MESSAGE))
        for i, link in enumerate(task.links):
            violations.extend(_link_violations(i, link))
        return violations

    def is_valid(self, task: TaskCreate) -> bool:
        return not self.validate(task)

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class TaskStatus(StrEnum):
    BACKLOG = "BACKLOG"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"
    DONE = "DONE"


class TaskPriority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


UNTITLED_PLACEHOLDER = "Untitled Task"
UNASSIGNED_SENTINEL = "Unassigned"

DEFAULT_STATUS = TaskStatus.BACKLOG
DEFAULT_PRIORITY = TaskPriority.MEDIUM


@dataclass(frozen=True, slots=True)
class CanonicalTask:
    """A legacy task after field reconciliation.

    Every field is populated.  ``due_date`` is the only optional value and
    is ``None`` when no due-date alias carried data.
    """

    id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    assignee: str
    due_date: str | None
    tags: list[str] = field(default_factory=list)
    normalized_at: str = ""

    def to_dict(self) -> dict[str, object]:
        """Return the JSON wire shape consumed by the board UI."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "assignee": self.assignee,
            "dueDate": self.due_date,
            "tags": list(self.tags),
            "normalizedAt": self.normalized_at,
        }

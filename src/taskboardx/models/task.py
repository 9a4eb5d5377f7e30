"""Task domain model."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from .base import RecordModel
from .project import Assignee


class TaskStatus(str, Enum):
    """Valid states for a task. Any state may move to any other."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @property
    def label(self) -> str:
        """Column heading for display."""
        return _LABELS[self]


_LABELS = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}

# Board column order
STATUS_ORDER = (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE)


class Task(RecordModel):
    """A task belonging to exactly one project."""

    id: str
    title: str = Field(..., min_length=1)
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime
    due_date: datetime | None = None
    project_id: str
    assignees: list[Assignee] = Field(default_factory=list)
    updated_at: datetime | None = None

    @property
    def assignee_ids(self) -> list[str]:
        return [a.id for a in self.assignees]

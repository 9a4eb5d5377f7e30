"""Repository for tasks."""

from __future__ import annotations

from ..models import Task
from ..store import Collection
from .base import CollectionRepository

TASKS_KEY = "tbx:tasks_v1"


class TaskRepository(CollectionRepository[Task]):
    """
    Tasks stored under ``tbx:tasks_v1``.

    A status change is a plain ``update(id, {"status": ...})``; any status may
    follow any other.
    """

    collection = Collection.of(TASKS_KEY, list[Task], list)
    entity = "task"

    def list_by_project(self, project_id: str) -> list[Task]:
        """Tasks belonging to a project, in collection order."""
        return [t for t in self.list() if t.project_id == project_id]

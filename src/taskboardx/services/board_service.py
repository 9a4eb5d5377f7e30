"""Service for kanban board state and status transitions."""

from __future__ import annotations

import logging

from ..exceptions import InvalidInputError
from ..models import STATUS_ORDER, Board, Task, TaskStatus
from ..repositories import TaskRepository

logger = logging.getLogger(__name__)


class BoardService:
    """
    Service for board state management.

    A drag-and-drop gesture is only a proposed transition: ``handle_drop``
    resolves it to a status and hands it to ``move_task``, the same path a
    form edit or the CLI uses.
    """

    def __init__(self, tasks: TaskRepository) -> None:
        self.tasks = tasks

    def load_board(self, project_id: str | None = None) -> Board:
        """Load the board with tasks grouped by status."""
        tasks = self.tasks.list()
        if project_id:
            tasks = [t for t in tasks if t.project_id == project_id]
        return Board.from_tasks(tasks)

    def get_tasks_by_status(self, status: TaskStatus) -> list[Task]:
        """Get all tasks in a specific status."""
        return [t for t in self.tasks.list() if t.status == status]

    def move_task(self, task_id: str, to_status: TaskStatus | str) -> Task | None:
        """
        Move a task to a different status column.

        Any status may follow any other. Only the status (and the update
        stamp) changes.

        Returns:
            The updated task, or None if it doesn't exist.
        """
        try:
            status = TaskStatus(to_status)
        except ValueError:
            raise InvalidInputError(f"Unknown status: {to_status}") from None

        task = self.tasks.get(task_id)
        if task is None:
            logger.debug("move_task: task not found: %s", task_id)
            return None

        updated = self.tasks.update(task_id, {"status": status})
        logger.info("Task moved: %s (%s -> %s)", task_id, task.status.value, status.value)
        return updated

    @staticmethod
    def resolve_drop(task_id: str, over_id: str | None, tasks: list[Task]) -> TaskStatus | None:
        """
        Work out the status a dropped task should take.

        - Dropped on a column: that column's status
        - Dropped on another task: that task's status
        - Dropped elsewhere: None
        """
        if over_id is None:
            return None
        if over_id in {s.value for s in STATUS_ORDER}:
            return TaskStatus(over_id)
        for task in tasks:
            if task.id == over_id and task.id != task_id:
                return task.status
        return None

    def handle_drop(self, task_id: str, over_id: str | None) -> Task | None:
        """
        Apply a drop of ``task_id`` onto ``over_id`` (a status or a task id).

        Nothing is written when the drop resolves to the task's current status.

        Returns:
            The task after the drop, or None if the dragged task doesn't exist.
        """
        tasks = self.tasks.list()
        active = next((t for t in tasks if t.id == task_id), None)
        if active is None:
            logger.debug("handle_drop: task not found: %s", task_id)
            return None

        new_status = self.resolve_drop(task_id, over_id, tasks)
        if new_status is None or new_status == active.status:
            logger.debug("handle_drop: no status change for %s (over=%s)", task_id, over_id)
            return active

        return self.move_task(task_id, new_status)

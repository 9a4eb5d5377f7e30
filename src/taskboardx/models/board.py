"""Board state models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .task import STATUS_ORDER, Task, TaskStatus


class Board(BaseModel):
    """Tasks grouped into the three status columns."""

    columns: dict[TaskStatus, list[Task]] = Field(default_factory=dict)

    @classmethod
    def from_tasks(cls, tasks: list[Task]) -> Board:
        """Create Board from tasks, grouping by status in collection order."""
        board = cls(columns={status: [] for status in STATUS_ORDER})
        for task in tasks:
            board.columns[task.status].append(task)
        return board

    def get_column(self, status: TaskStatus) -> list[Task]:
        """Get tasks for a specific column."""
        return self.columns.get(status, [])

    def get_visible_columns(self) -> list[tuple[TaskStatus, str, list[Task]]]:
        """
        Get columns in display order.

        Returns:
            List of (status, title, tasks) tuples.
        """
        return [(status, status.label, self.get_column(status)) for status in STATUS_ORDER]

    def find_task(self, task_id: str) -> Task | None:
        """Find a task anywhere on the board."""
        for tasks in self.columns.values():
            for task in tasks:
                if task.id == task_id:
                    return task
        return None

    @property
    def todo(self) -> list[Task]:
        return self.get_column(TaskStatus.TODO)

    @property
    def in_progress(self) -> list[Task]:
        return self.get_column(TaskStatus.IN_PROGRESS)

    @property
    def done(self) -> list[Task]:
        return self.get_column(TaskStatus.DONE)

    def to_json_dict(self) -> dict[str, list[dict]]:
        """Columns keyed by status value, tasks in stored JSON form."""
        return {
            status.value: [t.to_json_dict() for t in self.get_column(status)]
            for status in STATUS_ORDER
        }

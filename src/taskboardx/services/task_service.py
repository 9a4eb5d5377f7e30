"""Service for task CRUD operations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..exceptions import InvalidInputError, ProjectNotFoundError
from ..models import Assignee, Project, Task, TaskStatus
from ..repositories import ProjectRepository, TaskRepository
from ..utils import now_utc, time_based_id, unique_id
from .integrity import IntegrityCoordinator
from .validation import require_text, validate_task_due_date

logger = logging.getLogger(__name__)

SORT_KEYS = ("title", "due", "created")

_optional_datetime = TypeAdapter(datetime | None)


class TaskService:
    """Service for task CRUD operations."""

    def __init__(
        self,
        tasks: TaskRepository,
        projects: ProjectRepository,
        integrity: IntegrityCoordinator | None = None,
    ) -> None:
        self.tasks = tasks
        self.projects = projects
        self.integrity = integrity or IntegrityCoordinator(projects, tasks)

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by ID."""
        return self.tasks.get(task_id)

    def list_tasks(
        self,
        project_id: str | None = None,
        status: TaskStatus | None = None,
        search: str | None = None,
        sort_by: str | None = None,
    ) -> list[Task]:
        """
        List tasks with the task table's filters.

        Args:
            project_id: Only tasks of this project
            status: Only tasks in this status
            search: Case-insensitive substring of title or description
            sort_by: "title", "due" (undated first) or "created" (newest first)
        """
        out = self.tasks.list()
        if project_id:
            out = [t for t in out if t.project_id == project_id]
        if search:
            needle = search.lower()
            out = [
                t
                for t in out
                if needle in t.title.lower() or needle in (t.description or "").lower()
            ]
        if status is not None:
            out = [t for t in out if t.status == status]

        if sort_by == "title":
            out.sort(key=lambda t: t.title.casefold())
        elif sort_by == "due":
            out.sort(key=lambda t: (t.due_date is not None, t.due_date or t.created_at))
        elif sort_by == "created":
            out.sort(key=lambda t: t.created_at, reverse=True)
        elif sort_by is not None:
            raise InvalidInputError(f"Unknown sort key: {sort_by}")
        return out

    def create_task(
        self,
        title: str,
        project_id: str,
        description: str | None = None,
        status: TaskStatus = TaskStatus.TODO,
        due_date: datetime | None = None,
        assignee_id: str | None = None,
    ) -> Task:
        """
        Create a task and add it to its project's task index.

        Raises:
            InvalidInputError: If the title is empty or the due date is invalid.
            ProjectNotFoundError: If the project doesn't exist.
        """
        title = require_text(title, "Task title is required")
        status = TaskStatus(status)
        project = self.projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        due_date = validate_task_due_date(due_date, project.deadline)

        task = Task(
            id=unique_id(time_based_id("task"), self.tasks.ids()),
            title=title,
            description=description or None,
            status=status,
            created_at=now_utc(),
            due_date=due_date,
            project_id=project.id,
            assignees=[self._assignee(project, assignee_id)] if assignee_id else [],
        )
        self.tasks.create(task)
        self.integrity.register_task(task)
        logger.info("Task created: %s (project=%s, status=%s)", task.id, project.id, status.value)
        return task

    def update_task(
        self,
        task_id: str,
        title: str,
        description: str | None = None,
        due_date: datetime | None = None,
        assignee_id: str | None = None,
    ) -> Task | None:
        """
        Apply an edit of the task form.

        Title, description and due date are replaced; the status is kept. An
        ``assignee_id`` not already assigned is appended.

        Returns:
            The updated task, or None if it doesn't exist.
        """
        title = require_text(title, "Task title is required")
        task = self.tasks.get(task_id)
        if task is None:
            logger.debug("update_task: task not found: %s", task_id)
            return None

        project = self.projects.get(task.project_id)
        due_date = validate_task_due_date(due_date, project.deadline if project else None)

        assignees = list(task.assignees)
        if assignee_id and assignee_id not in task.assignee_ids:
            assignees.append(self._assignee(project, assignee_id))

        updated = self.tasks.update(
            task_id,
            {
                "title": title,
                "description": description or None,
                "due_date": due_date,
                "assignees": assignees,
            },
        )
        logger.info("Task updated: %s", task_id)
        return updated

    def patch_task(self, task_id: str, patch: Mapping[str, Any]) -> Task | None:
        """
        Merge a raw patch (field names or camelCase keys) onto a task.

        Raises:
            InvalidInputError: On an invalid value or an attempt to move the
                task to another project.
        """
        task = self.tasks.get(task_id)
        if task is None:
            logger.debug("patch_task: task not found: %s", task_id)
            return None

        fields = {Task.field_name(k): v for k, v in patch.items()}
        if "project_id" in fields and fields["project_id"] != task.project_id:
            raise InvalidInputError("Moving a task between projects is not supported")
        if "title" in fields:
            require_text(fields["title"], "Task title is required")
        try:
            if fields.get("due_date") is not None:
                project = self.projects.get(task.project_id)
                validate_task_due_date(
                    _optional_datetime.validate_python(fields["due_date"]),
                    project.deadline if project else None,
                )
            return self.tasks.update(task_id, patch)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid task data: {e.errors()[0]['msg']}") from e

    def delete_task(self, task_id: str) -> bool:
        """Delete a task and drop it from its project's task index."""
        logger.info("Deleting task: %s", task_id)
        deleted = self.tasks.delete(task_id)
        self.integrity.unregister_task(task_id)
        return deleted

    def remove_assignee(self, task_id: str, member_id: str) -> Task | None:
        """Unassign a member from a single task."""
        task = self.tasks.get(task_id)
        if task is None:
            logger.debug("remove_assignee: task not found: %s", task_id)
            return None
        assignees = [a for a in task.assignees if a.id != member_id]
        return self.tasks.update(task_id, {"assignees": assignees})

    def _assignee(self, project: Project | None, assignee_id: str) -> Assignee:
        """Build an assignee record, taking the name from the project members."""
        member = project.find_member(assignee_id) if project else None
        return Assignee(id=assignee_id, name=member.name if member else "")

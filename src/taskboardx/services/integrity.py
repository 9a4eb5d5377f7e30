"""Cross-repository cascade rules.

Repositories only ever touch their own collection. Every rule that keeps the
denormalized references between projects and tasks consistent lives here:

- removing a member strips it from the assignees of the project's tasks
- deleting a project deletes its tasks first, then the project
- creating/deleting a task adds/removes its id in the project task index
- ``reconcile`` rebuilds every project task index from the task collection

None of these run in a transaction. A failed write part-way through leaves
earlier writes in place; ``reconcile`` repairs the task indices afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models import Project, ProjectMember, Task
from ..repositories import ProjectRepository, TaskRepository

logger = logging.getLogger(__name__)


class IntegrityCoordinator:
    """Keeps project members, task assignees and task indices in sync."""

    def __init__(self, projects: ProjectRepository, tasks: TaskRepository) -> None:
        self.projects = projects
        self.tasks = tasks

    # --- Members ---

    def remove_member(self, project_id: str, member_id: str) -> Project | None:
        """
        Remove a member from a project and from its tasks' assignees.

        The project is written before the tasks are scanned.

        Returns:
            The updated project, or None if the project doesn't exist.
        """
        project = self.projects.get(project_id)
        if project is None:
            logger.debug("remove_member: project not found: %s", project_id)
            return None

        members = [m for m in project.members if m.id != member_id]
        if len(members) == len(project.members):
            logger.debug("remove_member: %s is not a member of %s", member_id, project_id)
            updated = project
        else:
            updated = self.projects.update(project_id, {"members": members})
        changed = self.strip_assignees(project_id, {member_id})
        logger.info(
            "Member removed: %s from %s (%d task(s) updated)",
            member_id,
            project_id,
            len(changed),
        )
        return updated

    def sync_members(
        self,
        project_id: str,
        old_members: Iterable[ProjectMember],
        new_members: Iterable[ProjectMember],
    ) -> list[Task]:
        """Strip members dropped by a bulk member edit from the project's tasks."""
        new_ids = {m.id for m in new_members}
        removed = {m.id for m in old_members if m.id not in new_ids}
        if not removed:
            return []
        return self.strip_assignees(project_id, removed)

    def strip_assignees(self, project_id: str, member_ids: set[str]) -> list[Task]:
        """
        Remove the given ids from the assignees of every task in a project.

        Only tasks whose assignees actually change are written.
        """
        changed: list[Task] = []
        for task in self.tasks.list_by_project(project_id):
            assignees = [a for a in task.assignees if a.id not in member_ids]
            if len(assignees) == len(task.assignees):
                continue
            updated = self.tasks.update(task.id, {"assignees": assignees})
            if updated is not None:
                changed.append(updated)
        return changed

    # --- Projects ---

    def delete_project(self, project_id: str) -> int:
        """
        Delete a project and all of its tasks.

        Tasks are deleted before the project itself.

        Returns:
            Number of tasks deleted.
        """
        project_tasks = self.tasks.list_by_project(project_id)
        for task in project_tasks:
            self.tasks.delete(task.id)

        if not self.projects.delete(project_id):
            logger.debug("delete_project: project not found: %s", project_id)

        logger.info("Project deleted: %s (%d task(s))", project_id, len(project_tasks))
        return len(project_tasks)

    # --- Task index ---

    def register_task(self, task: Task) -> bool:
        """
        Add a task id to its project's task index (at most once).

        Returns:
            False if the owning project doesn't exist.
        """
        project = self.projects.get(task.project_id)
        if project is None:
            logger.warning(
                "register_task: project %s not found for task %s", task.project_id, task.id
            )
            return False

        if task.id in project.tasks:
            return True

        self.projects.update(project.id, {"tasks": [*project.tasks, task.id]})
        return True

    def unregister_task(self, task_id: str) -> bool:
        """
        Remove a task id from every project index that lists it.

        Returns:
            True if any project index changed.
        """
        owners = self.projects.find_by_task(task_id)
        for project in owners:
            self.projects.update(project.id, {"tasks": [t for t in project.tasks if t != task_id]})
        if not owners:
            logger.debug("unregister_task: no project lists task %s", task_id)
        return bool(owners)

    def reconcile(self) -> int:
        """
        Rebuild every project's task index from the task collection.

        - Tasks are the source of truth for project membership
        - Existing index order is kept
        - Ids of missing tasks (or tasks of other projects) are dropped
        - Tasks missing from the index are appended in collection order

        Returns:
            Number of projects whose index was rewritten.
        """
        by_project: dict[str, list[str]] = {}
        for task in self.tasks.list():
            by_project.setdefault(task.project_id, []).append(task.id)

        projects = self.projects.list()
        modified = 0
        for idx, project in enumerate(projects):
            actual = by_project.get(project.id, [])
            actual_set = set(actual)

            index: list[str] = []
            for task_id in project.tasks:
                if task_id in actual_set and task_id not in index:
                    index.append(task_id)
            for task_id in actual:
                if task_id not in index:
                    index.append(task_id)

            if index != project.tasks:
                projects[idx] = project.model_copy(update={"tasks": index})
                modified += 1
                logger.info("Task index rebuilt: %s (%d task(s))", project.id, len(index))

        if modified:
            self.projects.save_all(projects)
        return modified

    def orphaned_tasks(self) -> list[Task]:
        """Tasks whose project no longer exists."""
        project_ids = self.projects.ids()
        return [t for t in self.tasks.list() if t.project_id not in project_ids]

"""Service for project operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ..models import Project, ProjectMember
from ..repositories import ProfileRepository, ProjectRepository, TaskRepository
from ..utils import new_member_id, now_utc, time_based_id, unique_id
from .integrity import IntegrityCoordinator
from .validation import require_text, validate_project_deadline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Totals:
    """Dashboard counters."""

    projects: int
    tasks: int
    members: int


class ProjectService:
    """Service for project CRUD, membership and cascades."""

    def __init__(
        self,
        projects: ProjectRepository,
        tasks: TaskRepository,
        profile: ProfileRepository,
        integrity: IntegrityCoordinator | None = None,
    ) -> None:
        self.projects = projects
        self.tasks = tasks
        self.profile = profile
        self.integrity = integrity or IntegrityCoordinator(projects, tasks)

    def list_projects(self) -> list[Project]:
        """Get all projects."""
        return self.projects.list()

    def get_project(self, project_id: str) -> Project | None:
        """Get a project by ID."""
        return self.projects.get(project_id)

    def create_project(
        self,
        name: str,
        description: str | None = None,
        deadline: datetime | None = None,
        members: list[ProjectMember] | None = None,
    ) -> Project:
        """
        Create a new project managed by the local profile.

        Raises:
            InvalidInputError: If the name is empty or the deadline is in the past.
        """
        name = require_text(name, "Project name is required")
        deadline = validate_project_deadline(deadline)

        project = Project(
            id=unique_id(time_based_id("proj"), self.projects.ids()),
            name=name,
            description=description or None,
            created_at=now_utc(),
            deadline=deadline,
            manager_id=self.profile.load().id,
            members=members or [],
            tasks=[],
        )
        self.projects.create(project)
        logger.info("Project created: %s (%s)", project.id, project.name)
        return project

    def update_project(
        self,
        project_id: str,
        name: str,
        description: str | None = None,
        deadline: datetime | None = None,
        members: list[ProjectMember] | None = None,
    ) -> Project | None:
        """
        Apply an edit of the project dialog.

        Name, description, deadline and the member list are replaced. Members
        dropped from the list are removed from the assignees of the project's
        tasks.

        Returns:
            The updated project, or None if it doesn't exist.
        """
        name = require_text(name, "Project name is required")
        deadline = validate_project_deadline(deadline)

        existing = self.projects.get(project_id)
        if existing is None:
            logger.debug("update_project: project not found: %s", project_id)
            return None

        new_members = members if members is not None else existing.members
        updated = self.projects.update(
            project_id,
            {
                "name": name,
                "description": description or None,
                "deadline": deadline,
                "members": new_members,
            },
        )
        changed = self.integrity.sync_members(project_id, existing.members, new_members)
        logger.info("Project updated: %s (%d task(s) unassigned)", project_id, len(changed))
        return updated

    def new_members(self, names: Iterable[str]) -> list[ProjectMember]:
        """
        Build invited members from names, each with a fresh id.

        Raises:
            InvalidInputError: If any name is empty. Nothing is written.
        """
        return [
            ProjectMember(id=new_member_id(), name=require_text(name, "Member name is required"))
            for name in names
        ]

    def invite_member(self, project_id: str, name: str) -> ProjectMember | None:
        """
        Add a member by name with a freshly generated id.

        Returns:
            The new member, or None if the project doesn't exist.
        """
        name = require_text(name, "Member name is required")
        project = self.projects.get(project_id)
        if project is None:
            logger.debug("invite_member: project not found: %s", project_id)
            return None

        member = ProjectMember(id=new_member_id(), name=name)
        self.projects.update(project_id, {"members": [*project.members, member]})
        logger.info("Member invited: %s (%s) to %s", member.id, name, project_id)
        return member

    def remove_member(self, project_id: str, member_id: str) -> Project | None:
        """Remove a member from a project and from all of its tasks."""
        return self.integrity.remove_member(project_id, member_id)

    def delete_project(self, project_id: str) -> int:
        """Delete a project and its tasks. Returns the number of tasks deleted."""
        return self.integrity.delete_project(project_id)

    def managed_projects(self, manager_id: str | None = None) -> list[Project]:
        """Projects managed by the given profile (default: the local profile)."""
        if manager_id is None:
            manager_id = self.profile.load().id
        return self.projects.managed_by(manager_id)

    def list_users(self) -> list[ProjectMember]:
        """All project members, flattened across projects."""
        return [m for p in self.projects.list() for m in p.members]

    def totals(self) -> Totals:
        """Count projects, indexed tasks and members."""
        projects = self.projects.list()
        return Totals(
            projects=len(projects),
            tasks=sum(len(p.tasks) for p in projects),
            members=sum(len(p.members) for p in projects),
        )

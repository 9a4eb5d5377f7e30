"""Repository for projects."""

from __future__ import annotations

from ..models import DEFAULT_PROFILE_ID, Project, ProjectMember
from ..store import Collection
from ..utils import days_from_now, now_utc, time_based_id
from .base import CollectionRepository

PROJECTS_KEY = "tbx:projects_v1"


def sample_projects() -> list[Project]:
    """The example project seeded into empty storage."""
    return [
        Project(
            id=time_based_id("proj"),
            name="Sample Project",
            description="A sample project for testing",
            created_at=now_utc(),
            deadline=days_from_now(7),
            manager_id=DEFAULT_PROFILE_ID,
            members=[
                ProjectMember(id=DEFAULT_PROFILE_ID, name="Leader"),
                ProjectMember(id="member-2", name="Member"),
            ],
            tasks=[],
        )
    ]


class ProjectRepository(CollectionRepository[Project]):
    """
    Projects stored under ``tbx:projects_v1``.

    Does not cascade to tasks and does not validate deadlines; both are the
    caller's job (see IntegrityCoordinator and the validation helpers).
    """

    collection = Collection.of(PROJECTS_KEY, list[Project], sample_projects)
    entity = "project"

    def find_by_task(self, task_id: str) -> list[Project]:
        """Projects whose task index lists the given task."""
        return [p for p in self.list() if task_id in p.tasks]

    def managed_by(self, manager_id: str) -> list[Project]:
        """Projects managed by the given profile."""
        return [p for p in self.list() if p.manager_id == manager_id]

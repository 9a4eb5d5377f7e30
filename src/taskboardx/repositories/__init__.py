"""Repository layer for data access."""

from .base import CollectionRepository
from .profile import PROFILE_KEY, ProfileRepository
from .projects import PROJECTS_KEY, ProjectRepository, sample_projects
from .tasks import TASKS_KEY, TaskRepository

__all__ = [
    "PROFILE_KEY",
    "PROJECTS_KEY",
    "TASKS_KEY",
    "CollectionRepository",
    "ProfileRepository",
    "ProjectRepository",
    "TaskRepository",
    "sample_projects",
]

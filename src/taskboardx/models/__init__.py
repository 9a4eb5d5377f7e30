"""Data models."""

from .board import Board
from .profile import DEFAULT_PROFILE_ID, Profile
from .project import Assignee, Project, ProjectMember
from .task import STATUS_ORDER, Task, TaskStatus

__all__ = [
    "DEFAULT_PROFILE_ID",
    "STATUS_ORDER",
    "Assignee",
    "Board",
    "Profile",
    "Project",
    "ProjectMember",
    "Task",
    "TaskStatus",
]

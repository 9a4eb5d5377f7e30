"""Service layer for business logic."""

from .board_service import BoardService
from .integrity import IntegrityCoordinator
from .profile_service import ProfileService
from .project_service import ProjectService, Totals
from .task_service import TaskService

__all__ = [
    "BoardService",
    "IntegrityCoordinator",
    "ProfileService",
    "ProjectService",
    "TaskService",
    "Totals",
]

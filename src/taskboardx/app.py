"""Wiring of storage, repositories and services."""

from __future__ import annotations

from .config import Settings
from .repositories import ProfileRepository, ProjectRepository, TaskRepository
from .services import (
    BoardService,
    IntegrityCoordinator,
    ProfileService,
    ProjectService,
    TaskService,
)
from .store import FileStorage, MemoryStorage, RecordStore, StorageProtocol


class TaskBoard:
    """All repositories and services over one storage backend."""

    def __init__(self, storage: StorageProtocol | None = None) -> None:
        self.storage: StorageProtocol = storage if storage is not None else MemoryStorage()
        self._init_services()

    @classmethod
    def from_settings(cls, settings: Settings) -> TaskBoard:
        """Build a board stored under ``settings.storage_dir``."""
        return cls(FileStorage(settings.storage_dir))

    def _init_services(self) -> None:
        """Initialize repositories and services."""
        self.store = RecordStore(self.storage)

        self.projects = ProjectRepository(self.store)
        self.tasks = TaskRepository(self.store)
        self.profile = ProfileRepository(self.store)

        self.integrity = IntegrityCoordinator(self.projects, self.tasks)
        self.project_service = ProjectService(
            self.projects, self.tasks, self.profile, self.integrity
        )
        self.task_service = TaskService(self.tasks, self.projects, self.integrity)
        self.board_service = BoardService(self.tasks)
        self.profile_service = ProfileService(self.profile)

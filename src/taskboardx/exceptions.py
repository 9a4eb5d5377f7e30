"""Exception hierarchy for taskboardx.

Services raise these; the CLI and the HTTP API catch them and turn them into
user-facing messages or status codes.
"""


class TaskBoardError(Exception):
    """Base exception for all taskboardx errors."""


class InvalidInputError(TaskBoardError):
    """Input validation failed. Raised before anything is written."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ProjectNotFoundError(TaskBoardError):
    """Project with given ID doesn't exist."""

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(f"Project {project_id} not found")


class TaskNotFoundError(TaskBoardError):
    """Task with given ID doesn't exist."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class StorageError(TaskBoardError):
    """The storage backend could not write a blob."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Could not write {key}: {reason}")

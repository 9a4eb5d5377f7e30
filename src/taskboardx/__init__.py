"""taskboardx - local project and task manager with a kanban board."""

__version__ = "0.1.0"

"""CLI entry point for taskboardx."""

import argparse
from pathlib import Path

from . import __version__
from .app import TaskBoard
from .cli import commands
from .config import Settings
from .logging import setup_logging
from .models import STATUS_ORDER
from .services.task_service import SORT_KEYS

STATUS_CHOICES = [s.value for s in STATUS_ORDER]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="taskboardx",
        description="Local project and task manager with a kanban board",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=None,
        help="Directory holding the stored collections (default: ~/.taskboardx)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # projects
    projects = sub.add_parser("projects", help="Manage projects")
    projects_sub = projects.add_subparsers(dest="action", required=True)

    p = projects_sub.add_parser("list", help="List projects")
    p.add_argument("--managed", action="store_true", help="Only projects you manage")
    p.set_defaults(handler=commands.projects_list)

    p = projects_sub.add_parser("create", help="Create a project")
    p.add_argument("name")
    p.add_argument("--description", default=None)
    p.add_argument("--deadline", type=commands.parse_date, default=None)
    p.add_argument("--member", action="append", help="Invite a member by name (repeatable)")
    p.set_defaults(handler=commands.projects_create)

    p = projects_sub.add_parser("delete", help="Delete a project and its tasks")
    p.add_argument("project_id")
    p.set_defaults(handler=commands.projects_delete)

    p = projects_sub.add_parser("invite", help="Invite a member to a project")
    p.add_argument("project_id")
    p.add_argument("name")
    p.set_defaults(handler=commands.projects_invite)

    p = projects_sub.add_parser("remove-member", help="Remove a member from a project")
    p.add_argument("project_id")
    p.add_argument("member_id")
    p.set_defaults(handler=commands.projects_remove_member)

    # tasks
    tasks = sub.add_parser("tasks", help="Manage tasks")
    tasks_sub = tasks.add_subparsers(dest="action", required=True)

    p = tasks_sub.add_parser("list", help="List tasks")
    p.add_argument("--project", default=None)
    p.add_argument("--status", choices=STATUS_CHOICES, default=None)
    p.add_argument("--search", default=None)
    p.add_argument(
        "--sort",
        choices=SORT_KEYS,
        default="created",
        help="Sort order (default: created, newest first)",
    )
    p.set_defaults(handler=commands.tasks_list)

    p = tasks_sub.add_parser("create", help="Create a task")
    p.add_argument("title")
    p.add_argument("--project", required=True)
    p.add_argument("--description", default=None)
    p.add_argument("--status", choices=STATUS_CHOICES, default="TODO")
    p.add_argument("--due", type=commands.parse_date, default=None)
    p.add_argument("--assignee", default=None, help="Member id to assign")
    p.set_defaults(handler=commands.tasks_create)

    p = tasks_sub.add_parser("delete", help="Delete a task")
    p.add_argument("task_id")
    p.set_defaults(handler=commands.tasks_delete)

    p = tasks_sub.add_parser("move", help="Move a task to a status column")
    p.add_argument("task_id")
    p.add_argument("status", choices=STATUS_CHOICES)
    p.set_defaults(handler=commands.tasks_move)

    p = tasks_sub.add_parser("drop", help="Drop a task onto a column or another task")
    p.add_argument("task_id")
    p.add_argument("over", help="Status column or task id the task was dropped on")
    p.set_defaults(handler=commands.tasks_drop)

    # board
    p = sub.add_parser("board", help="Show the kanban board")
    p.add_argument("--project", default=None)
    p.set_defaults(handler=commands.show_board)

    # profile
    profile = sub.add_parser("profile", help="Show or edit your profile")
    profile_sub = profile.add_subparsers(dest="action", required=True)

    p = profile_sub.add_parser("show", help="Show your profile")
    p.set_defaults(handler=commands.profile_show)

    p = profile_sub.add_parser("update", help="Update your profile")
    p.add_argument("--name", default=None)
    p.add_argument("--dob", default=None, help="Date of birth (YYYY-MM-DD)")
    p.add_argument("--position", default=None)
    p.add_argument("--avatar", type=Path, default=None, help="Avatar image file")
    p.add_argument("--cover-photo", type=Path, default=None, help="Cover photo image file")
    p.set_defaults(handler=commands.profile_update)

    # maintenance
    p = sub.add_parser("check", help="Rebuild project task indices and report orphans")
    p.set_defaults(handler=commands.check)

    p = sub.add_parser("serve", help="Serve the JSON API")
    p.add_argument("--host", default=None)
    p.add_argument("--port", type=int, default=None)
    p.set_defaults(handler=None)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.storage_dir:
        settings_kwargs["storage_dir"] = args.storage_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    if args.command == "serve":
        if args.host:
            settings_kwargs["host"] = args.host
        if args.port:
            settings_kwargs["port"] = args.port

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    board = TaskBoard.from_settings(settings)

    if args.command == "serve":
        from .api import serve

        serve(board, settings.host, settings.port)
        raise SystemExit(0)

    raise SystemExit(commands.run(board, args))


if __name__ == "__main__":
    main()

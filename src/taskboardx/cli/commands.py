"""Sub-command handlers. Each returns a process exit code."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path

from ..app import TaskBoard
from ..exceptions import TaskBoardError
from ..models import Project, Task, TaskStatus
from ..utils import from_iso, guess_image_type
from .output import error, header, info, success

logger = logging.getLogger(__name__)


def parse_date(value: str) -> datetime:
    """argparse type for ISO dates and datetimes."""
    try:
        return from_iso(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date: {value}") from None


def run(board: TaskBoard, args: argparse.Namespace) -> int:
    """Dispatch to the handler selected by the parser."""
    try:
        return args.handler(board, args)
    except TaskBoardError as e:
        logger.debug("Command failed: %s", e)
        error(str(e))
        return 1


def _describe_project(project: Project) -> str:
    deadline = f", due {project.deadline.date().isoformat()}" if project.deadline else ""
    return (
        f"{project.id}  {project.name} "
        f"({len(project.members)} member(s), {len(project.tasks)} task(s){deadline})"
    )


def _describe_task(task: Task) -> str:
    assignees = ", ".join(a.name or a.id for a in task.assignees) or "unassigned"
    due = f", due {task.due_date.date().isoformat()}" if task.due_date else ""
    return f"{task.id}  [{task.status.value}] {task.title} ({assignees}{due})"


# --- Projects ---


def projects_list(board: TaskBoard, args: argparse.Namespace) -> int:
    if args.managed:
        projects = board.project_service.managed_projects()
    else:
        projects = board.project_service.list_projects()
    if not projects:
        info("No projects")
    for project in projects:
        print(_describe_project(project))
    return 0


def projects_create(board: TaskBoard, args: argparse.Namespace) -> int:
    members = board.project_service.new_members(args.member or [])
    project = board.project_service.create_project(
        name=args.name,
        description=args.description,
        deadline=args.deadline,
        members=members,
    )
    success(f"Project created successfully: {project.id}")
    return 0


def projects_delete(board: TaskBoard, args: argparse.Namespace) -> int:
    if board.project_service.get_project(args.project_id) is None:
        error(f"Project {args.project_id} not found")
        return 1
    count = board.project_service.delete_project(args.project_id)
    success(f"Project and {count} task(s) deleted")
    return 0


def projects_invite(board: TaskBoard, args: argparse.Namespace) -> int:
    member = board.project_service.invite_member(args.project_id, args.name)
    if member is None:
        error(f"Project {args.project_id} not found")
        return 1
    success(f"Member invited: {member.name} ({member.id})")
    return 0


def projects_remove_member(board: TaskBoard, args: argparse.Namespace) -> int:
    project = board.project_service.remove_member(args.project_id, args.member_id)
    if project is None:
        error(f"Project {args.project_id} not found")
        return 1
    success("Member removed from project")
    return 0


# --- Tasks ---


def tasks_list(board: TaskBoard, args: argparse.Namespace) -> int:
    tasks = board.task_service.list_tasks(
        project_id=args.project,
        status=TaskStatus(args.status) if args.status else None,
        search=args.search,
        sort_by=args.sort,
    )
    if not tasks:
        info("No tasks")
    for task in tasks:
        print(_describe_task(task))
    return 0


def tasks_create(board: TaskBoard, args: argparse.Namespace) -> int:
    task = board.task_service.create_task(
        title=args.title,
        project_id=args.project,
        description=args.description,
        status=TaskStatus(args.status),
        due_date=args.due,
        assignee_id=args.assignee,
    )
    success(f"Task created: {task.id}")
    return 0


def tasks_delete(board: TaskBoard, args: argparse.Namespace) -> int:
    if not board.task_service.delete_task(args.task_id):
        error(f"Task {args.task_id} not found")
        return 1
    success("Task deleted")
    return 0


def tasks_move(board: TaskBoard, args: argparse.Namespace) -> int:
    task = board.board_service.move_task(args.task_id, args.status)
    if task is None:
        error(f"Task {args.task_id} not found")
        return 1
    success(f"Task moved to {task.status.label}")
    return 0


def tasks_drop(board: TaskBoard, args: argparse.Namespace) -> int:
    task = board.board_service.handle_drop(args.task_id, args.over)
    if task is None:
        error(f"Task {args.task_id} not found")
        return 1
    success(f"Task is in {task.status.label}")
    return 0


# --- Board / profile / maintenance ---


def show_board(board: TaskBoard, args: argparse.Namespace) -> int:
    for _status, title, tasks in board.board_service.load_board(args.project).get_visible_columns():
        header(f"{title} ({len(tasks)})")
        for task in tasks:
            print(f"  {_describe_task(task)}")
    return 0


def profile_show(board: TaskBoard, args: argparse.Namespace) -> int:
    profile = board.profile_service.get_profile()
    header(profile.name or "(no name)")
    print(f"  id:       {profile.id}")
    print(f"  dob:      {profile.dob}")
    print(f"  position: {profile.position}")
    totals = board.project_service.totals()
    info(f"{totals.projects} project(s), {totals.tasks} task(s), {totals.members} member(s)")
    return 0


def _read_image(path: Path | None) -> tuple[bytes, str] | None:
    if path is None:
        return None
    try:
        return path.read_bytes(), guess_image_type(path.name)
    except (OSError, ValueError) as e:
        raise TaskBoardError(f"Failed to upload image: {e}") from e


def profile_update(board: TaskBoard, args: argparse.Namespace) -> int:
    current = board.profile_service.get_profile()
    board.profile_service.update_profile(
        name=args.name if args.name is not None else current.name,
        dob=args.dob if args.dob is not None else current.dob,
        position=args.position if args.position is not None else current.position,
        avatar=_read_image(args.avatar),
        cover_photo=_read_image(args.cover_photo),
    )
    success("Profile updated successfully")
    return 0


def check(board: TaskBoard, args: argparse.Namespace) -> int:
    rebuilt = board.integrity.reconcile()
    orphans = board.integrity.orphaned_tasks()
    if rebuilt:
        info(f"Rebuilt task index of {rebuilt} project(s)")
    for task in orphans:
        info(f"Orphaned task: {task.id} (project {task.project_id})")
    success("Check complete")
    return 0

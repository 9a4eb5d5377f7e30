"""
JSON API over the task board.

Thin pass-through endpoints; every route delegates to a service.

API:
    GET   /api/projects              -> [Project]
    GET   /api/projects/<id>/tasks   -> [Task]
    POST  /api/tasks                 -> Task  (also indexed on its project)
    PATCH /api/tasks/<id>            -> { success: true }
    GET   /api/users                 -> [ProjectMember]  (all project members)
    GET   /api/board?projectId=<id>  -> { TODO: [...], IN_PROGRESS: [...], DONE: [...] }
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request
from pydantic import ValidationError

from .app import TaskBoard
from .exceptions import InvalidInputError, ProjectNotFoundError, TaskNotFoundError
from .models import TaskStatus
from .utils import from_iso

logger = logging.getLogger(__name__)


def _json_object() -> dict[str, Any]:
    """The request body, which must be a JSON object (an absent body is empty)."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return data


def create_app(board: TaskBoard) -> Flask:
    """Build the Flask app for a task board."""
    app = Flask(__name__)
    app.config["TASKBOARD"] = board

    @app.errorhandler(InvalidInputError)
    def invalid_input(e: InvalidInputError):
        return jsonify({"error": e.message}), 400

    @app.errorhandler(ValidationError)
    def invalid_record(e: ValidationError):
        return jsonify({"error": f"Invalid task data: {e.errors()[0]['msg']}"}), 400

    @app.errorhandler(ProjectNotFoundError)
    @app.errorhandler(TaskNotFoundError)
    def not_found(e: ProjectNotFoundError | TaskNotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.get("/api/projects")
    def list_projects():
        projects = board.project_service.list_projects()
        return jsonify([p.to_json_dict() for p in projects])

    @app.get("/api/projects/<project_id>/tasks")
    def list_project_tasks(project_id: str):
        tasks = board.task_service.list_tasks(project_id=project_id)
        return jsonify([t.to_json_dict() for t in tasks])

    @app.post("/api/tasks")
    def create_task():
        data = _json_object()
        try:
            status = TaskStatus(data.get("status", TaskStatus.TODO.value))
            due_date = from_iso(data["dueDate"]) if data.get("dueDate") else None
        except (TypeError, AttributeError, ValueError) as e:
            raise InvalidInputError(f"Invalid task data: {e}") from None

        task = board.task_service.create_task(
            title=data.get("title", ""),
            project_id=data.get("projectId", ""),
            description=data.get("description"),
            status=status,
            due_date=due_date,
            assignee_id=data.get("assigneeId"),
        )
        return jsonify(task.to_json_dict()), 201

    @app.patch("/api/tasks/<task_id>")
    def patch_task(task_id: str):
        task = board.task_service.patch_task(task_id, _json_object())
        if task is None:
            raise TaskNotFoundError(task_id)
        return jsonify({"success": True})

    @app.get("/api/users")
    def list_users():
        users = board.project_service.list_users()
        return jsonify([u.model_dump() for u in users])

    @app.get("/api/board")
    def get_board():
        project_id = request.args.get("projectId")
        return jsonify(board.board_service.load_board(project_id).to_json_dict())

    return app


def serve(board: TaskBoard, host: str, port: int) -> None:
    """Run the development server."""
    logger.info("Serving API on http://%s:%d", host, port)
    create_app(board).run(host=host, port=port)

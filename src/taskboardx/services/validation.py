"""Input validation run before any write."""

from __future__ import annotations

from datetime import date, datetime

from ..exceptions import InvalidInputError
from ..utils import ensure_aware, now_utc, start_of_day


def require_text(value: object, message: str) -> str:
    """Return the stripped value, or raise if it is empty or not a string."""
    if value is not None and not isinstance(value, str):
        raise InvalidInputError(message)
    text = (value or "").strip()
    if not text:
        raise InvalidInputError(message)
    return text


def validate_project_deadline(
    deadline: datetime | None, now: datetime | None = None
) -> datetime | None:
    """
    Check a project deadline is not before today.

    The comparison is by date only: any time today is accepted.
    """
    if deadline is None:
        return None
    deadline = ensure_aware(deadline)
    today = start_of_day(now or now_utc())
    if deadline < today:
        raise InvalidInputError("Deadline cannot be in the past")
    return deadline


def validate_task_due_date(
    due_date: datetime | None,
    project_deadline: datetime | None = None,
    now: datetime | None = None,
) -> datetime | None:
    """
    Check a task due date against the current time and the project deadline.

    A due date equal to the deadline is accepted.
    """
    if due_date is None:
        return None
    due_date = ensure_aware(due_date)
    if due_date < ensure_aware(now or now_utc()):
        raise InvalidInputError("Due date cannot be in the past")
    if project_deadline is not None and due_date > ensure_aware(project_deadline):
        raise InvalidInputError("Task due date cannot be after project deadline")
    return due_date


def validate_dob(value: str | None) -> str:
    """Check a date of birth is an ISO date (YYYY-MM-DD)."""
    text = require_text(value, "Date of birth is required")
    try:
        date.fromisoformat(text)
    except ValueError:
        raise InvalidInputError("Invalid date") from None
    return text

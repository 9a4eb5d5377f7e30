"""Identifier generation for projects, tasks and members."""

import uuid
from collections.abc import Container

from .datetime import epoch_millis


def time_based_id(prefix: str) -> str:
    """
    Generate a time-based id.

    Example: "task" -> "task-1718000000000"
    """
    return f"{prefix}-{epoch_millis()}"


def unique_id(candidate: str, existing: Container[str]) -> str:
    """Ensure an id is unique by appending numbers if needed."""
    base = candidate
    counter = 1

    while candidate in existing:
        candidate = f"{base}-{counter}"
        counter += 1

    return candidate


def new_member_id() -> str:
    """Generate a random id for an invited member."""
    return str(uuid.uuid4())

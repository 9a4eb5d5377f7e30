"""Tests for input validation helpers."""

from datetime import UTC, datetime, timedelta

import pytest

from taskboardx.exceptions import InvalidInputError
from taskboardx.services.validation import (
    require_text,
    validate_dob,
    validate_project_deadline,
    validate_task_due_date,
)

NOW = datetime(2025, 3, 10, 15, 30, tzinfo=UTC)


class TestRequireText:
    def test_strips(self):
        assert require_text("  hi ", "msg") == "hi"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty(self, value):
        with pytest.raises(InvalidInputError, match="msg"):
            require_text(value, "msg")

    @pytest.mark.parametrize("value", [5, ["a"], {"a": 1}])
    def test_non_string(self, value):
        with pytest.raises(InvalidInputError, match="msg"):
            require_text(value, "msg")


class TestProjectDeadline:
    def test_none_allowed(self):
        assert validate_project_deadline(None, now=NOW) is None

    def test_earlier_today_allowed(self):
        deadline = datetime(2025, 3, 10, 1, 0, tzinfo=UTC)
        assert validate_project_deadline(deadline, now=NOW) == deadline

    def test_yesterday_rejected(self):
        with pytest.raises(InvalidInputError, match="Deadline cannot be in the past"):
            validate_project_deadline(datetime(2025, 3, 9, 23, 59, tzinfo=UTC), now=NOW)

    def test_naive_treated_as_utc(self):
        result = validate_project_deadline(datetime(2025, 4, 1), now=NOW)
        assert result.tzinfo is UTC


class TestTaskDueDate:
    def test_none_allowed(self):
        assert validate_task_due_date(None, now=NOW) is None

    def test_just_past_rejected(self):
        with pytest.raises(InvalidInputError, match="Due date cannot be in the past"):
            validate_task_due_date(NOW - timedelta(milliseconds=1), now=NOW)

    def test_now_allowed(self):
        assert validate_task_due_date(NOW, now=NOW) == NOW

    def test_equal_to_deadline_allowed(self):
        deadline = NOW + timedelta(days=7)
        assert validate_task_due_date(deadline, deadline, now=NOW) == deadline

    def test_after_deadline_rejected(self):
        deadline = NOW + timedelta(days=7)
        with pytest.raises(InvalidInputError, match="after project deadline"):
            validate_task_due_date(deadline + timedelta(milliseconds=1), deadline, now=NOW)


class TestDob:
    def test_valid(self):
        assert validate_dob(" 1990-05-01 ") == "1990-05-01"

    def test_required(self):
        with pytest.raises(InvalidInputError, match="Date of birth is required"):
            validate_dob("")

    @pytest.mark.parametrize("value", ["1990-13-01", "yesterday", "01/05/1990"])
    def test_invalid(self, value):
        with pytest.raises(InvalidInputError, match="Invalid date"):
            validate_dob(value)

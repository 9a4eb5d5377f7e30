"""Integration tests for ProjectService."""

from datetime import timedelta

import pytest

from taskboardx.app import TaskBoard
from taskboardx.exceptions import InvalidInputError
from taskboardx.models import ProjectMember
from taskboardx.repositories import PROJECTS_KEY
from taskboardx.services import ProjectService
from taskboardx.store import MemoryStorage
from taskboardx.utils import days_from_now, now_utc, start_of_day

ANN = ProjectMember(id="m1", name="Ann")
BOB = ProjectMember(id="m2", name="Bob")


@pytest.fixture
def board() -> TaskBoard:
    return TaskBoard(MemoryStorage({PROJECTS_KEY: "[]"}))


@pytest.fixture
def service(board: TaskBoard) -> ProjectService:
    return board.project_service


class TestCreateProject:
    """Tests for project creation."""

    def test_create_basic(self, service: ProjectService):
        project = service.create_project("  Alpha  ", description="First")

        assert project.id.startswith("proj-")
        assert project.name == "Alpha"
        assert project.description == "First"
        assert project.manager_id == "leader-1"
        assert project.tasks == []
        assert service.get_project(project.id) == project

    def test_ids_unique_when_created_quickly(self, service: ProjectService):
        ids = {service.create_project(f"P{i}").id for i in range(5)}
        assert len(ids) == 5

    def test_empty_name_rejected(self, service: ProjectService):
        with pytest.raises(InvalidInputError, match="Project name is required"):
            service.create_project("   ")
        assert service.list_projects() == []

    def test_deadline_in_past_rejected(self, service: ProjectService):
        with pytest.raises(InvalidInputError, match="Deadline cannot be in the past"):
            service.create_project("Alpha", deadline=now_utc() - timedelta(days=1))
        assert service.list_projects() == []

    def test_deadline_earlier_today_accepted(self, service: ProjectService):
        """Deadlines compare by date only."""
        project = service.create_project("Alpha", deadline=start_of_day(now_utc()))
        assert project.deadline == start_of_day(now_utc())

    def test_manager_follows_profile(self, board: TaskBoard, service: ProjectService):
        board.profile.update({"name": "Ann"})
        assert service.create_project("Alpha").manager_id == "leader-1"


class TestUpdateProject:
    """Tests for the project edit dialog."""

    def test_update_fields(self, service: ProjectService):
        project = service.create_project("Alpha", members=[ANN])

        updated = service.update_project(
            project.id, "Beta", description="New", deadline=days_from_now(3), members=[ANN, BOB]
        )

        assert updated.name == "Beta"
        assert updated.description == "New"
        assert updated.member_ids == ["m1", "m2"]
        assert updated.updated_at is not None

    def test_dropped_members_unassigned(self, board: TaskBoard, service: ProjectService):
        project = service.create_project("Alpha", members=[ANN, BOB])
        task = board.task_service.create_task("Write", project.id, assignee_id="m1")

        service.update_project(project.id, "Alpha", members=[BOB])

        assert board.tasks.get(task.id).assignees == []

    def test_members_kept_when_not_given(self, service: ProjectService):
        project = service.create_project("Alpha", members=[ANN])
        assert service.update_project(project.id, "Alpha").member_ids == ["m1"]

    def test_validation_before_write(self, service: ProjectService):
        project = service.create_project("Alpha")
        with pytest.raises(InvalidInputError):
            service.update_project(project.id, "Beta", deadline=now_utc() - timedelta(days=2))
        assert service.get_project(project.id).name == "Alpha"

    def test_unknown_project(self, service: ProjectService):
        assert service.update_project("missing", "Beta") is None


class TestMembers:
    """Tests for inviting and removing members."""

    def test_invite_generates_id(self, service: ProjectService):
        project = service.create_project("Alpha")

        member = service.invite_member(project.id, " Ann ")

        assert member.name == "Ann"
        assert len(member.id) == 36
        assert service.get_project(project.id).members == [member]

    def test_invite_requires_name(self, service: ProjectService):
        project = service.create_project("Alpha")
        with pytest.raises(InvalidInputError, match="Member name is required"):
            service.invite_member(project.id, "")

    def test_new_members_validates_every_name(self, service: ProjectService):
        members = service.new_members([" Ann ", "Bob"])
        assert [m.name for m in members] == ["Ann", "Bob"]
        assert members[0].id != members[1].id

        with pytest.raises(InvalidInputError, match="Member name is required"):
            service.new_members(["Ann", "  "])

    def test_invite_unknown_project(self, service: ProjectService):
        assert service.invite_member("missing", "Ann") is None

    def test_remove_member_cascades(self, board: TaskBoard, service: ProjectService):
        project = service.create_project("Alpha", members=[ANN, BOB])
        task = board.task_service.create_task("Write", project.id, assignee_id="m1")

        service.remove_member(project.id, "m1")

        assert service.get_project(project.id).member_ids == ["m2"]
        assert board.tasks.get(task.id).assignees == []


class TestDeleteProject:
    """Tests for project deletion."""

    def test_delete_removes_tasks(self, board: TaskBoard, service: ProjectService):
        project = service.create_project("Alpha")
        other = service.create_project("Beta")
        board.task_service.create_task("One", project.id)
        board.task_service.create_task("Two", project.id)
        kept = board.task_service.create_task("Three", other.id)

        assert service.delete_project(project.id) == 2

        assert service.get_project(project.id) is None
        assert [t.id for t in board.tasks.list()] == [kept.id]


class TestQueries:
    """Tests for read-only helpers."""

    def test_managed_projects(self, board: TaskBoard, service: ProjectService):
        mine = service.create_project("Alpha")
        board.projects.create(mine.model_copy(update={"id": "proj-x", "manager_id": "other"}))

        assert [p.id for p in service.managed_projects()] == [mine.id]
        assert [p.id for p in service.managed_projects("other")] == ["proj-x"]

    def test_list_users_flattens_members(self, service: ProjectService):
        service.create_project("Alpha", members=[ANN])
        service.create_project("Beta", members=[BOB, ANN])

        assert [u.id for u in service.list_users()] == ["m1", "m2", "m1"]

    def test_totals(self, board: TaskBoard, service: ProjectService):
        project = service.create_project("Alpha", members=[ANN, BOB])
        service.create_project("Beta", members=[ANN])
        board.task_service.create_task("One", project.id)

        totals = service.totals()

        assert (totals.projects, totals.tasks, totals.members) == (2, 1, 3)


class TestSeededStorage:
    """Behaviour on a fresh storage backend."""

    def test_sample_project_seeded(self):
        board = TaskBoard(MemoryStorage())
        projects = board.project_service.list_projects()

        assert [p.name for p in projects] == ["Sample Project"]
        assert projects[0].deadline is not None

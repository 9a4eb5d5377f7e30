"""Tests for the storage backends and RecordStore."""

import json
import os
from pathlib import Path

import pytest

from taskboardx.exceptions import StorageError
from taskboardx.models import Profile
from taskboardx.repositories import PROFILE_KEY, PROJECTS_KEY, TASKS_KEY
from taskboardx.repositories.profile import ProfileRepository
from taskboardx.repositories.projects import ProjectRepository
from taskboardx.repositories.tasks import TaskRepository
from taskboardx.store import FileStorage, MemoryStorage, RecordStore


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> RecordStore:
    return RecordStore(storage)


class TestMemoryStorage:
    """Tests for MemoryStorage."""

    def test_get_missing_returns_none(self, storage: MemoryStorage):
        assert storage.get_item("missing") is None

    def test_set_get_remove(self, storage: MemoryStorage):
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        assert list(storage.keys()) == ["k"]

        storage.remove_item("k")
        storage.remove_item("k")  # no error the second time
        assert storage.get_item("k") is None


class TestFileStorage:
    """Tests for FileStorage."""

    def test_creates_directory_on_write(self, tmp_path: Path):
        root = tmp_path / "data"
        storage = FileStorage(root)

        assert not root.exists()
        storage.set_item(TASKS_KEY, "[]")
        assert (root / "tbx_tasks_v1.json").read_text() == "[]"

    def test_get_missing_returns_none(self, tmp_path: Path):
        assert FileStorage(tmp_path).get_item(TASKS_KEY) is None

    def test_overwrite_and_keys(self, tmp_path: Path):
        storage = FileStorage(tmp_path)
        storage.set_item(TASKS_KEY, "[1]")
        storage.set_item(TASKS_KEY, "[2]")

        assert storage.get_item(TASKS_KEY) == "[2]"
        assert list(storage.keys()) == [TASKS_KEY]

    def test_remove_item(self, tmp_path: Path):
        storage = FileStorage(tmp_path)
        storage.set_item(TASKS_KEY, "[]")
        storage.remove_item(TASKS_KEY)
        storage.remove_item(TASKS_KEY)
        assert storage.get_item(TASKS_KEY) is None

    def test_failed_write_keeps_previous_value(self, tmp_path: Path, monkeypatch):
        """A write that fails part-way leaves the old blob and no temp files."""
        storage = FileStorage(tmp_path)
        storage.set_item(TASKS_KEY, "[1]")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)

        with pytest.raises(StorageError):
            storage.set_item(TASKS_KEY, "[2]")

        assert storage.get_item(TASKS_KEY) == "[1]"
        assert [p.name for p in tmp_path.iterdir()] == ["tbx_tasks_v1.json"]


class TestRecordStore:
    """Tests for loading and saving collections."""

    def test_missing_tasks_default_to_empty(self, store: RecordStore, storage: MemoryStorage):
        assert store.load(TaskRepository.collection) == []
        assert storage.get_item(TASKS_KEY) == "[]"

    def test_missing_projects_seed_sample(self, store: RecordStore, storage: MemoryStorage):
        projects = store.load(ProjectRepository.collection)

        assert len(projects) == 1
        assert projects[0].name == "Sample Project"
        assert [m.id for m in projects[0].members] == ["leader-1", "member-2"]
        # Seed is persisted, so a second load returns the same project
        assert store.load(ProjectRepository.collection) == projects
        assert storage.get_item(PROJECTS_KEY) is not None

    def test_missing_profile_seeds_default(self, store: RecordStore):
        assert store.load(ProfileRepository.collection) == Profile.default()

    def test_malformed_json_reseeds(self, store: RecordStore, storage: MemoryStorage):
        storage.set_item(TASKS_KEY, "{not json")

        assert store.load(TaskRepository.collection) == []
        assert storage.get_item(TASKS_KEY) == "[]"

    def test_invalid_records_reseed(self, store: RecordStore, storage: MemoryStorage):
        """A blob that parses but doesn't validate is treated as malformed."""
        storage.set_item(TASKS_KEY, json.dumps([{"id": "t1", "status": "NOPE"}]))
        assert store.load(TaskRepository.collection) == []

    def test_malformed_profile_reseeds_default(self, store: RecordStore, storage: MemoryStorage):
        storage.set_item(PROFILE_KEY, "[]")
        assert store.load(ProfileRepository.collection) == Profile.default()

    def test_round_trip(self, store: RecordStore):
        """save then load returns a structurally equal collection."""
        projects = store.load(ProjectRepository.collection)
        store.save(ProjectRepository.collection, projects + projects[:1])
        assert store.load(ProjectRepository.collection) == projects + projects[:1]

    def test_round_trip_file_storage(self, tmp_path: Path):
        writer = RecordStore(FileStorage(tmp_path))
        projects = writer.load(ProjectRepository.collection)

        reader = RecordStore(FileStorage(tmp_path))
        assert reader.load(ProjectRepository.collection) == projects

    def test_undecodable_file_reseeds(self, tmp_path: Path):
        (tmp_path / "tbx_tasks_v1.json").write_bytes(b"[\xff\xfe]")
        store = RecordStore(FileStorage(tmp_path))

        assert store.load(TaskRepository.collection) == []
        assert (tmp_path / "tbx_tasks_v1.json").read_text(encoding="utf-8") == "[]"

    def test_clear_reseeds_on_next_load(self, store: RecordStore, storage: MemoryStorage):
        store.save(TaskRepository.collection, [])
        store.clear(TaskRepository.collection)
        assert storage.get_item(TASKS_KEY) is None

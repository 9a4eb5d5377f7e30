"""Tests for ProfileService."""

import pytest

from taskboardx.app import TaskBoard
from taskboardx.exceptions import InvalidInputError
from taskboardx.repositories import PROFILE_KEY
from taskboardx.services import ProfileService
from taskboardx.store import MemoryStorage

PNG = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def service(storage: MemoryStorage) -> ProfileService:
    return TaskBoard(storage).profile_service


class TestProfileService:
    """Tests for the profile form."""

    def test_default_profile(self, service: ProfileService):
        profile = service.get_profile()
        assert profile.id == "leader-1"
        assert profile.name == ""

    def test_update_profile(self, service: ProfileService):
        profile = service.update_profile(" Ann ", "1990-05-01", "Lead")

        assert profile.id == "leader-1"
        assert profile.name == "Ann"
        assert profile.dob == "1990-05-01"
        assert profile.position == "Lead"
        assert service.get_profile() == profile

    def test_avatar_stored_as_data_url(self, service: ProfileService):
        profile = service.update_profile("Ann", "1990-05-01", "Lead", avatar=(PNG, "image/png"))

        assert profile.avatar_url.startswith("data:image/png;base64,")
        assert profile.cover_photo_url is None

    def test_images_kept_when_not_given(self, service: ProfileService):
        service.update_profile("Ann", "1990-05-01", "Lead", cover_photo=(PNG, "image/png"))
        profile = service.update_profile("Ann", "1990-05-01", "Manager")

        assert profile.cover_photo_url is not None

    @pytest.mark.parametrize(
        "name,dob,position,message",
        [
            ("", "1990-05-01", "Lead", "Name is required"),
            ("Ann", "", "Lead", "Date of birth is required"),
            ("Ann", "01/05/1990", "Lead", "Invalid date"),
            ("Ann", "1990-05-01", "  ", "Position is required"),
        ],
    )
    def test_validation(self, service: ProfileService, name, dob, position, message):
        with pytest.raises(InvalidInputError, match=message):
            service.update_profile(name, dob, position)

    def test_bad_image_aborts_update(self, service: ProfileService, storage: MemoryStorage):
        service.update_profile("Ann", "1990-05-01", "Lead")
        before = storage.get_item(PROFILE_KEY)

        with pytest.raises(InvalidInputError, match="Failed to upload image"):
            service.update_profile("Bob", "1990-05-01", "Lead", avatar=(b"x", "text/plain"))

        assert storage.get_item(PROFILE_KEY) == before

"""Service for the local user profile."""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import InvalidInputError
from ..models import Profile
from ..repositories import ProfileRepository
from ..utils import to_data_url
from .validation import require_text, validate_dob

logger = logging.getLogger(__name__)

# (raw bytes, mime type) of an uploaded image
Image = tuple[bytes, str]


class ProfileService:
    """Profile form handling."""

    def __init__(self, profile: ProfileRepository) -> None:
        self.profile = profile

    def get_profile(self) -> Profile:
        return self.profile.load()

    def update_profile(
        self,
        name: str,
        dob: str,
        position: str,
        avatar: Image | None = None,
        cover_photo: Image | None = None,
    ) -> Profile:
        """
        Validate and save the profile form.

        Images are converted to data URLs; an image that can't be converted
        aborts the update before anything is written.
        """
        patch: dict[str, Any] = {
            "name": require_text(name, "Name is required"),
            "dob": validate_dob(dob),
            "position": require_text(position, "Position is required"),
        }
        if avatar is not None:
            patch["avatar_url"] = self._image_url(avatar)
        if cover_photo is not None:
            patch["cover_photo_url"] = self._image_url(cover_photo)

        profile = self.profile.update(patch)
        logger.info("Profile updated: %s", profile.id)
        return profile

    def _image_url(self, image: Image) -> str:
        data, mime_type = image
        try:
            return to_data_url(data, mime_type)
        except ValueError as e:
            raise InvalidInputError(f"Failed to upload image: {e}") from e

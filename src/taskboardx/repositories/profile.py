"""Repository for the singleton profile."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import Profile
from ..store import Collection, RecordStore

PROFILE_KEY = "tbx:profile_v1"


class ProfileRepository:
    """The acting user's profile stored under ``tbx:profile_v1``."""

    collection = Collection.of(PROFILE_KEY, Profile, Profile.default)

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def load(self) -> Profile:
        """Load the profile, seeding the default identity on first access."""
        return self.store.load(self.collection)

    def update(self, patch: Mapping[str, Any]) -> Profile:
        """Merge a patch onto the profile and return the result."""
        updated = self.load().merged(patch)
        self.store.save(self.collection, updated)
        return updated

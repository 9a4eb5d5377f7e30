"""Profile of the local user."""

from .base import RecordModel

DEFAULT_PROFILE_ID = "leader-1"


class Profile(RecordModel):
    """Singleton record for the acting user."""

    id: str = DEFAULT_PROFILE_ID
    name: str = ""
    dob: str = ""  # ISO date, empty until the user fills it in
    position: str = ""
    avatar_url: str | None = None
    cover_photo_url: str | None = None

    @classmethod
    def default(cls) -> "Profile":
        """The identity seeded on first access."""
        return cls()

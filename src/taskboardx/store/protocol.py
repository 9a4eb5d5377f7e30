"""Storage protocol for key-value backends."""

from collections.abc import Iterator
from typing import Protocol


class StorageProtocol(Protocol):
    """Interface for synchronous string key-value storage.

    Mirrors browser local storage: one string blob per key, no transactions,
    no change notifications. Implementations include:
    - MemoryStorage (tests, throwaway sessions)
    - FileStorage (a directory of JSON files)
    """

    def get_item(self, key: str) -> str | None:
        """Get the blob stored under a key.

        Returns:
            The stored string, or None if the key is absent.
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the blob stored under a key."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key.

        Note:
            Does not raise an error if the key doesn't exist.
        """
        ...

    def keys(self) -> Iterator[str]:
        """Iterate over the stored keys."""
        ...

"""In-memory storage backend."""

from collections.abc import Iterator


class MemoryStorage:
    """Dict-backed storage. Contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> Iterator[str]:
        yield from list(self._items)

    def clear(self) -> None:
        self._items.clear()

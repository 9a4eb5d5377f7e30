"""Load and save whole collections as single serialized blobs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from .protocol import StorageProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Collection(Generic[T]):
    """A logical collection: storage key, value type and first-read default."""

    key: str
    adapter: TypeAdapter[T]
    default: Callable[[], T]

    @classmethod
    def of(cls, key: str, value_type: Any, default: Callable[[], T]) -> Collection[T]:
        return cls(key=key, adapter=TypeAdapter(value_type), default=default)


class RecordStore:
    """
    Synchronous persistence of one JSON blob per collection.

    Every save replaces the entire blob (last writer wins). There is no
    change notification; callers reload after any mutation.
    """

    def __init__(self, storage: StorageProtocol) -> None:
        self.storage = storage

    def load(self, collection: Collection[T]) -> T:
        """
        Deserialize a collection.

        A missing key, or a blob that fails to decode or validate, yields the
        collection's default, which is written back so later reads see the
        same value.
        """
        try:
            raw = self.storage.get_item(collection.key)
        except UnicodeDecodeError:
            logger.warning("Discarding undecodable data under %s, seeding default", collection.key)
            return self._reseed(collection)
        if raw is None:
            logger.debug("No data under %s, seeding default", collection.key)
            return self._reseed(collection)

        try:
            return collection.adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding malformed data under %s (%d errors), seeding default",
                collection.key,
                e.error_count(),
            )
            return self._reseed(collection)

    def save(self, collection: Collection[T], value: T) -> None:
        """Serialize and overwrite the blob for a collection."""
        # A serialization failure leaves the stored blob untouched
        payload = collection.adapter.dump_json(value, by_alias=True, exclude_none=True)
        self.storage.set_item(collection.key, payload.decode("utf-8"))

    def clear(self, collection: Collection[Any]) -> None:
        """Remove a collection so the next load seeds its default."""
        self.storage.remove_item(collection.key)

    def _reseed(self, collection: Collection[T]) -> T:
        value = collection.default()
        self.save(collection, value)
        return value

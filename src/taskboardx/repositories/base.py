"""Shared CRUD over a list-valued collection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from ..models.base import RecordModel
from ..store import Collection, RecordStore
from ..utils import now_utc

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=RecordModel)


class CollectionRepository(Generic[M]):
    """
    CRUD over records kept as one array blob.

    Every operation reads the full collection, changes it in memory and
    writes the full collection back. Operations on an unknown id are no-ops
    reported through the return value.
    """

    collection: Collection[list[M]]
    entity = "record"

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list(self) -> list[M]:
        """Full collection in insertion order."""
        return self.store.load(self.collection)

    def get(self, record_id: str) -> M | None:
        """Get a single record by id, or None."""
        for record in self.list():
            if record.id == record_id:
                return record
        return None

    def create(self, record: M) -> M:
        """Append a fully formed record."""
        records = self.list()
        records.append(record)
        self.save_all(records)
        logger.debug("%s appended: %s", self.entity.capitalize(), record.id)
        return record

    def update(self, record_id: str, patch: Mapping[str, Any]) -> M | None:
        """
        Merge a patch onto the matching record and stamp ``updated_at``.

        Returns:
            The updated record, or None if no record has that id.
        """
        records = self.list()
        for idx, record in enumerate(records):
            if record.id == record_id:
                updated = record.merged(patch, updated_at=now_utc())
                records[idx] = updated
                self.save_all(records)
                return updated

        logger.debug("update: %s not found: %s", self.entity, record_id)
        return None

    def delete(self, record_id: str) -> bool:
        """
        Remove the matching record.

        Returns:
            True if a record was removed. Deleting twice is harmless.
        """
        records = self.list()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            logger.debug("delete: %s not found: %s", self.entity, record_id)
            return False

        self.save_all(remaining)
        return True

    def save_all(self, records: list[M]) -> None:
        """Replace the whole collection."""
        self.store.save(self.collection, records)

    def ids(self) -> set[str]:
        return {r.id for r in self.list()}

"""Filesystem-based storage backend."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from collections.abc import Iterator
from pathlib import Path

from ..exceptions import StorageError

logger = logging.getLogger(__name__)


class FileStorage:
    """
    Storage with one JSON file per key.

    Keys are mapped to filenames by replacing anything outside
    ``[A-Za-z0-9_.-]`` with ``_`` (``tbx:tasks_v1`` -> ``tbx_tasks_v1.json``).
    Writes go through a temp file and ``os.replace`` so a reader never sees
    a half-written blob.
    """

    SUFFIX = ".json"

    def __init__(self, root: Path) -> None:
        """
        Initialize storage.

        Args:
            root: Directory holding the blobs (created on first write)
        """
        self.root = root
        self._key_names: dict[str, str] = {}

    def ensure_directory(self) -> None:
        """Create the storage directory if it doesn't exist."""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """Get the file path for a key."""
        name = re.sub(r"[^A-Za-z0-9_.\-]", "_", key)
        self._key_names[name] = key
        return self.root / f"{name}{self.SUFFIX}"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self.ensure_directory()
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{path.stem}-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Write failed for %s: %s", key, e)
            raise StorageError(key, str(e)) from e
        logger.debug("Wrote %s (%d bytes)", path.name, len(value))

    def remove_item(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)

    def keys(self) -> Iterator[str]:
        """Iterate over stored keys (original spelling when known)."""
        if not self.root.exists():
            return
        for path in sorted(self.root.glob(f"*{self.SUFFIX}")):
            yield self._key_names.get(path.stem, path.stem)

"""Key-value storage backends and the record store on top of them."""

from .filesystem import FileStorage
from .memory import MemoryStorage
from .protocol import StorageProtocol
from .record_store import Collection, RecordStore

__all__ = [
    "Collection",
    "FileStorage",
    "MemoryStorage",
    "RecordStore",
    "StorageProtocol",
]

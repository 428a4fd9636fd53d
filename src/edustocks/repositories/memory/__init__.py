"""In-memory repository implementations."""

from edustocks.repositories.memory.record_store import InMemoryRecordStore

__all__ = [
    "InMemoryRecordStore",
]

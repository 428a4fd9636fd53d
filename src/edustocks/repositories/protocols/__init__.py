"""Repository protocol definitions (interfaces)."""

from edustocks.repositories.protocols.record_store import RecordStore

__all__ = [
    "RecordStore",
]

"""Process-local RecordStore implementation."""

import copy
import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class InMemoryRecordStore(Generic[T]):
    """
    Dict-backed record store guarded by a lock.

    Records are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self) -> None:
        self._records: dict[str, T] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            record = self._records.get(key)
            return copy.deepcopy(record) if record is not None else None

    def put(self, key: str, record: T) -> None:
        snapshot = copy.deepcopy(record)
        with self._lock:
            self._records[key] = snapshot

    def list_all(self) -> list[T]:
        with self._lock:
            return [copy.deepcopy(self._records[k]) for k in sorted(self._records)]

    def delete(self, key: str) -> None:
        with self._lock:
            self._records.pop(key, None)

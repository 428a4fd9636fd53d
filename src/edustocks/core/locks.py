"""Per-key mutual exclusion for read-modify-write on a single record."""

import threading
from contextlib import contextmanager
from typing import Iterator


class KeyedLock:
    """
    Registry of one lock per key.

    Operations holding the lock for a key are serialized against each other;
    operations on different keys never block one another. A key's lock is
    dropped once nobody holds or waits on it.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        # key -> (lock, number of holders and waiters)
        self._locks: dict[str, tuple[threading.RLock, int]] = {}

    def _acquire_slot(self, key: str) -> threading.RLock:
        with self._guard:
            lock, users = self._locks.get(key, (None, 0))
            if lock is None:
                lock = threading.RLock()
            self._locks[key] = (lock, users + 1)
            return lock

    def _release_slot(self, key: str) -> None:
        with self._guard:
            lock, users = self._locks[key]
            if users <= 1:
                del self._locks[key]
            else:
                self._locks[key] = (lock, users - 1)

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        """Hold the lock for `key` for the duration of the block."""
        lock = self._acquire_slot(key)
        try:
            with lock:
                yield
        finally:
            self._release_slot(key)

"""Keyed record store protocol."""

from typing import Optional, Protocol, TypeVar

T = TypeVar("T")


class RecordStore(Protocol[T]):
    """
    Interface for whole-record persistence keyed by a string.

    `put` replaces everything previously stored under the key; there are no
    partial updates and no transactions across keys.
    """

    def get(self, key: str) -> Optional[T]:
        """Retrieve the record stored under `key`, or None."""
        ...

    def put(self, key: str, record: T) -> None:
        """Store `record` under `key`, replacing any previous record."""
        ...

    def list_all(self) -> list[T]:
        """List every stored record, ordered by key."""
        ...

    def delete(self, key: str) -> None:
        """Remove the record under `key`; a missing key is a no-op."""
        ...

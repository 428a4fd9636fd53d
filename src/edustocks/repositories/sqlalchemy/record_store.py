"""SQLAlchemy implementation of RecordStore."""

import json
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from edustocks.core.exceptions import StorageUnavailableError
from edustocks.core.timezone import now_eastern
from edustocks.repositories.codecs import RecordCodec
from edustocks.repositories.sqlalchemy.orm_models import RecordORM

T = TypeVar("T")


class SqlAlchemyRecordStore(Generic[T]):
    """
    SQLAlchemy-backed record store for one collection.

    Each call opens its own session, so one store instance can be shared
    across request threads.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        collection: str,
        codec: RecordCodec[T],
    ):
        self._session_factory = session_factory
        self._collection = collection
        self._codec = codec

    def get(self, key: str) -> Optional[T]:
        """Retrieve the record stored under key."""
        try:
            with self._session_factory() as db:
                orm_record = db.get(RecordORM, (self._collection, key))
                if orm_record is None:
                    return None
                payload = orm_record.payload
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"get {self._collection}/{key}", str(exc)) from exc
        return self._codec.from_payload(json.loads(payload))

    def put(self, key: str, record: T) -> None:
        """Replace the record stored under key."""
        payload = json.dumps(self._codec.to_payload(record))
        try:
            with self._session_factory() as db:
                orm_record = db.get(RecordORM, (self._collection, key))
                if orm_record is None:
                    orm_record = RecordORM(collection=self._collection, record_key=key)
                    db.add(orm_record)
                orm_record.payload = payload
                orm_record.updated_at_est = now_eastern()
                db.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"put {self._collection}/{key}", str(exc)) from exc

    def list_all(self) -> list[T]:
        """List all records in the collection, ordered by key."""
        try:
            with self._session_factory() as db:
                payloads = [
                    row.payload
                    for row in db.query(RecordORM)
                    .filter(RecordORM.collection == self._collection)
                    .order_by(RecordORM.record_key)
                    .all()
                ]
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"list {self._collection}", str(exc)) from exc
        return [self._codec.from_payload(json.loads(p)) for p in payloads]

    def delete(self, key: str) -> None:
        """Delete the record under key."""
        try:
            with self._session_factory() as db:
                db.query(RecordORM).filter(
                    RecordORM.collection == self._collection,
                    RecordORM.record_key == key,
                ).delete()
                db.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"delete {self._collection}/{key}", str(exc)) from exc

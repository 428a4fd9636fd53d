"""SQLAlchemy repository implementations."""

from edustocks.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    init_db,
    reset_database,
    Base,
)
from edustocks.repositories.sqlalchemy.record_store import SqlAlchemyRecordStore

__all__ = [
    "get_engine",
    "get_session_factory",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyRecordStore",
]

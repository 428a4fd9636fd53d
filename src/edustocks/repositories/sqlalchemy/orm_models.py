"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, DateTime, String, Text

from edustocks.repositories.sqlalchemy.database import Base


class RecordORM(Base):
    """One whole record (JSON payload) per (collection, key)."""

    __tablename__ = "records"

    collection = Column(String(64), primary_key=True)
    record_key = Column(String(255), primary_key=True)
    payload = Column(Text, nullable=False)
    updated_at_est = Column(DateTime(timezone=True), nullable=False)

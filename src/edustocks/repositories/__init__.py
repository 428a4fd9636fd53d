"""Repository layer - data access abstractions and implementations."""

from edustocks.repositories.protocols import RecordStore
from edustocks.repositories.codecs import RecordCodec, PortfolioCodec, UserProgressCodec
from edustocks.repositories.memory import InMemoryRecordStore

PORTFOLIO_COLLECTION = "portfolios"
PROGRESS_COLLECTION = "user_progress"

__all__ = [
    "RecordStore",
    "RecordCodec",
    "PortfolioCodec",
    "UserProgressCodec",
    "InMemoryRecordStore",
    "PORTFOLIO_COLLECTION",
    "PROGRESS_COLLECTION",
]

"""Core utilities and shared functionality."""

from edustocks.core.timezone import (
    now_eastern,
    to_eastern,
    parse_datetime_eastern,
    EASTERN_TZ,
)
from edustocks.core.locks import KeyedLock
from edustocks.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    UnauthenticatedError,
    InvalidQuantityError,
    StockNotFoundError,
    InsufficientBalanceError,
    InsufficientSharesError,
    ConfigurationError,
    UpstreamRateLimitedError,
    UpstreamInvalidResponseError,
    UpstreamUnavailableError,
    StorageUnavailableError,
    TutorUnavailableError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "parse_datetime_eastern",
    "EASTERN_TZ",
    "KeyedLock",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "UnauthenticatedError",
    "InvalidQuantityError",
    "StockNotFoundError",
    "InsufficientBalanceError",
    "InsufficientSharesError",
    "ConfigurationError",
    "UpstreamRateLimitedError",
    "UpstreamInvalidResponseError",
    "UpstreamUnavailableError",
    "StorageUnavailableError",
    "TutorUnavailableError",
]

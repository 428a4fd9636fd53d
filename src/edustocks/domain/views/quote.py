"""Quote snapshots and the result variants returned by a quote lookup."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from edustocks.domain.models.enums import QuoteErrorKind


@dataclass(frozen=True)
class Quote:
    """Point-in-time market price snapshot for a symbol."""

    symbol: str
    display_name: str
    price: Decimal
    change: Decimal
    change_percent: Decimal
    volume: int
    exchange: str

    @property
    def is_tradable(self) -> bool:
        """A quote can only price a trade when its price is positive."""
        return self.price > 0


@dataclass(frozen=True)
class CachedQuote:
    """Cache entry; `fetched_at` is a monotonic clock reading in seconds."""

    quote: Quote
    fetched_at: float

    def is_fresh(self, now: float, ttl_seconds: float) -> bool:
        return now - self.fetched_at < ttl_seconds


@dataclass(frozen=True)
class LiveQuote:
    """Quote obtained from the provider, either now or from a fresh cache entry."""

    quote: Quote
    cached: bool = False


@dataclass(frozen=True)
class FallbackQuote:
    """Built-in approximate quote served because the live path failed."""

    quote: Quote
    reason: QuoteErrorKind


@dataclass(frozen=True)
class QuoteFailure:
    """No quote could be produced and no fallback exists."""

    symbol: str
    reason: QuoteErrorKind
    message: str


QuoteLookup = Union[LiveQuote, FallbackQuote, QuoteFailure]

"""Quote cache: TTL-bounded memo of market quotes with built-in fallback data."""

import logging
import threading
import time
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from edustocks.core.exceptions import (
    AppError,
    ConfigurationError,
    StockNotFoundError,
    UpstreamInvalidResponseError,
    UpstreamRateLimitedError,
    UpstreamUnavailableError,
)
from edustocks.domain.models import QuoteErrorKind
from edustocks.domain.views import (
    CachedQuote,
    FallbackQuote,
    LiveQuote,
    Quote,
    QuoteFailure,
    QuoteLookup,
)
from edustocks.providers.fallback_quotes import FALLBACK_QUOTES, WATCHLIST
from edustocks.providers.quote_provider import (
    ProviderUnavailable,
    QuoteProvider,
    RateLimited,
)

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 600
DEFAULT_EXCHANGE = "US"
ZERO = Decimal("0")


def normalize_symbol(symbol: Optional[str]) -> str:
    """Canonical form: stripped and upper-cased; empty string for blank input."""
    return (symbol or "").strip().upper()


def _to_decimal(value: Any) -> Decimal:
    """Parse a provider number; anything unparsable becomes 0."""
    try:
        result = Decimal(str(value).replace("%", "").strip())
    except (InvalidOperation, TypeError, ValueError):
        return ZERO
    return result if result.is_finite() else ZERO


def _to_int(value: Any) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


def _is_empty_global_quote(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get("Global Quote") == {}


class QuoteCache:
    """
    Answers "what does this symbol trade at right now".

    Live quotes are memoized per symbol for `cache_ttl_seconds`. When the
    provider is uncredentialed, rate-limited, broken or unreachable, known
    symbols are served from built-in fallback data, which is never cached.
    Safe for concurrent use; concurrent misses on one symbol may both fetch.
    """

    def __init__(
        self,
        provider: QuoteProvider,
        cache_ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        watchlist: tuple[str, ...] = WATCHLIST,
        fallback_quotes: Optional[dict[str, Quote]] = None,
    ):
        self._provider = provider
        self._ttl = cache_ttl_seconds
        self._clock = clock
        self._watchlist = watchlist
        self._fallbacks = FALLBACK_QUOTES if fallback_quotes is None else fallback_quotes
        self._entries: dict[str, CachedQuote] = {}
        self._lock = threading.Lock()

    def lookup(self, symbol: str) -> QuoteLookup:
        """
        Resolve a symbol to a live quote, a fallback quote, or a failure.

        Never raises for provider problems; the variant says what happened.
        """
        key = normalize_symbol(symbol)
        if not key:
            return QuoteFailure(symbol or "", QuoteErrorKind.INVALID_SYMBOL, "Symbol is required")

        cached = self._get_fresh(key)
        if cached is not None:
            logger.debug("Quote cache hit for %s", key)
            return LiveQuote(quote=cached, cached=True)

        if not self._provider.is_configured:
            return self._fallback_or_fail(
                key,
                QuoteErrorKind.NOT_CONFIGURED,
                "Stock API key not configured",
            )

        try:
            response = self._provider.fetch_quote(key)
        except Exception as exc:
            logger.warning("Quote provider raised for %s: %s", key, exc)
            return self._fallback_or_fail(key, QuoteErrorKind.UNAVAILABLE, str(exc))

        if isinstance(response, RateLimited):
            return self._fallback_or_fail(key, QuoteErrorKind.RATE_LIMITED, response.message)
        if isinstance(response, ProviderUnavailable):
            return self._fallback_or_fail(key, QuoteErrorKind.UNAVAILABLE, response.message)

        # Alpha Vantage answers an unknown ticker with an empty "Global Quote"
        if _is_empty_global_quote(response.payload):
            return self._fallback_or_fail(
                key,
                QuoteErrorKind.UNKNOWN_SYMBOL,
                f"No quote available for {key}",
            )

        quote = self._parse_global_quote(key, response.payload)
        if quote is None:
            return self._fallback_or_fail(
                key,
                QuoteErrorKind.INVALID_RESPONSE,
                f"Invalid response from quote provider for {key}",
            )

        with self._lock:
            self._entries[key] = CachedQuote(quote=quote, fetched_at=self._clock())
        return LiveQuote(quote=quote)

    def get_quote(self, symbol: str) -> Quote:
        """Return a quote for `symbol` or raise the AppError matching the failure."""
        result = self.lookup(symbol)
        if isinstance(result, QuoteFailure):
            raise self._failure_to_error(result)
        return result.quote

    def get_all_quotes(self) -> list[Quote]:
        """One quote per watch-list symbol; symbols with no quote at all are skipped."""
        quotes: list[Quote] = []
        for symbol in self._watchlist:
            result = self.lookup(symbol)
            if isinstance(result, QuoteFailure):
                logger.warning("Skipping %s in quote list: %s", symbol, result.message)
                continue
            quotes.append(result.quote)
        return quotes

    def search_quotes(self, query: str) -> list[Quote]:
        """Watch-list quotes whose symbol or name contains `query` (case-insensitive)."""
        needle = (query or "").strip().lower()
        quotes = self.get_all_quotes()
        if not needle:
            return quotes
        return [
            q for q in quotes
            if needle in q.symbol.lower() or needle in q.display_name.lower()
        ]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _get_fresh(self, key: str) -> Optional[Quote]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is not None and entry.is_fresh(self._clock(), self._ttl):
            return entry.quote
        return None

    def _fallback_or_fail(
        self,
        key: str,
        reason: QuoteErrorKind,
        message: str,
    ) -> QuoteLookup:
        fallback = self._fallbacks.get(key)
        if fallback is not None:
            logger.warning("Serving fallback quote for %s (%s: %s)", key, reason.value, message)
            return FallbackQuote(quote=fallback, reason=reason)
        logger.warning("No quote for %s (%s: %s)", key, reason.value, message)
        return QuoteFailure(symbol=key, reason=reason, message=message)

    def _parse_global_quote(self, key: str, payload: Any) -> Optional[Quote]:
        """Decode an Alpha Vantage GLOBAL_QUOTE payload; None when unusable."""
        if not isinstance(payload, dict):
            return None
        body = payload.get("Global Quote")
        if not isinstance(body, dict):
            return None

        price = _to_decimal(body.get("05. price", "0"))
        # A zero price would let a trade acquire shares for free.
        if price <= 0:
            return None

        known = self._fallbacks.get(key)
        return Quote(
            symbol=key,
            display_name=known.display_name if known else key,
            price=price,
            change=_to_decimal(body.get("09. change", "0")),
            change_percent=_to_decimal(body.get("10. change percent", "0%")),
            volume=_to_int(body.get("06. volume", "0")),
            exchange=known.exchange if known else DEFAULT_EXCHANGE,
        )

    @staticmethod
    def _failure_to_error(failure: QuoteFailure) -> AppError:
        if failure.reason == QuoteErrorKind.NOT_CONFIGURED:
            return ConfigurationError(
                f"{failure.message}; no built-in quote for {failure.symbol}"
            )
        if failure.reason == QuoteErrorKind.RATE_LIMITED:
            return UpstreamRateLimitedError(failure.symbol)
        if failure.reason == QuoteErrorKind.INVALID_RESPONSE:
            return UpstreamInvalidResponseError(failure.symbol)
        if failure.reason == QuoteErrorKind.UNAVAILABLE:
            return UpstreamUnavailableError(failure.symbol, failure.message)
        return StockNotFoundError(failure.symbol, failure.message)

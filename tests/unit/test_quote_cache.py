"""
Unit tests for QuoteCache.

Tests cover:
- Freshness: no provider call within the TTL, refetch after it
- Fallback data when the provider is unconfigured, rate-limited or failing
- Typed errors when no fallback exists
- Tolerant parsing of GLOBAL_QUOTE payloads
- Watch-list listing and search
"""

from decimal import Decimal

import pytest

from edustocks.core.exceptions import (
    ConfigurationError,
    StockNotFoundError,
    UpstreamInvalidResponseError,
    UpstreamRateLimitedError,
    UpstreamUnavailableError,
)
from edustocks.domain.models import QuoteErrorKind
from edustocks.domain.views import FallbackQuote, LiveQuote, QuoteFailure
from edustocks.providers import RawQuote, WATCHLIST
from edustocks.services import QuoteCache

from tests.conftest import (
    CountingQuoteProvider,
    ManualClock,
    RaisingQuoteProvider,
    RateLimitedQuoteProvider,
    UnavailableQuoteProvider,
)


class PayloadProvider(CountingQuoteProvider):
    """Returns one fixed payload for every symbol."""

    def __init__(self, payload):
        super().__init__()
        self.payload = payload

    def fetch_quote(self, symbol: str):
        self.calls[symbol] = self.calls.get(symbol, 0) + 1
        return RawQuote(payload=self.payload)


# =============================================================================
# FRESHNESS TESTS
# =============================================================================


class TestCacheFreshness:
    """Tests for TTL-bounded memoization."""

    def test_second_lookup_within_ttl_does_not_call_provider(
        self,
        quote_cache: QuoteCache,
        quote_provider: CountingQuoteProvider,
        clock: ManualClock,
    ):
        """
        GIVEN AAPL was fetched at t0
        WHEN AAPL is requested again at t0 + 599s
        THEN the cached quote is returned and the provider is not called again
        """
        first = quote_cache.lookup("AAPL")
        clock.advance(599)
        second = quote_cache.lookup("AAPL")

        assert isinstance(first, LiveQuote) and not first.cached
        assert isinstance(second, LiveQuote) and second.cached
        assert second.quote == first.quote
        assert quote_provider.call_count("AAPL") == 1

    def test_lookup_after_ttl_refetches(
        self,
        quote_cache: QuoteCache,
        quote_provider: CountingQuoteProvider,
        clock: ManualClock,
    ):
        """
        GIVEN AAPL was fetched at 150.00
        WHEN the price changes and 600s pass
        THEN the next lookup calls the provider and returns the new price
        """
        quote_cache.lookup("AAPL")
        quote_provider.set_price("AAPL", "160.00")
        clock.advance(600)

        result = quote_cache.lookup("AAPL")

        assert result.quote.price == Decimal("160.00")
        assert quote_provider.call_count("AAPL") == 2

    def test_symbol_is_normalized_before_caching(
        self,
        quote_cache: QuoteCache,
        quote_provider: CountingQuoteProvider,
    ):
        """Lowercase and padded symbols share the canonical cache entry."""
        quote_cache.lookup(" aapl ")
        result = quote_cache.lookup("AAPL")

        assert result.quote.symbol == "AAPL"
        assert quote_provider.call_count("AAPL") == 1

    def test_clear_forces_refetch(
        self,
        quote_cache: QuoteCache,
        quote_provider: CountingQuoteProvider,
    ):
        quote_cache.lookup("MSFT")
        quote_cache.clear()
        quote_cache.lookup("MSFT")

        assert quote_provider.call_count("MSFT") == 2


# =============================================================================
# FALLBACK TESTS
# =============================================================================


class TestFallback:
    """Tests for built-in fallback quotes."""

    def test_rate_limited_known_symbol_returns_fallback(self):
        """
        GIVEN the provider is rate-limited
        WHEN a watch-list symbol is requested
        THEN the built-in fallback quote is returned with the reason
        """
        cache = QuoteCache(provider=RateLimitedQuoteProvider())

        result = cache.lookup("AAPL")

        assert isinstance(result, FallbackQuote)
        assert result.reason == QuoteErrorKind.RATE_LIMITED
        assert result.quote.price == Decimal("185.50")
        assert result.quote.display_name == "Apple Inc."

    def test_fallback_quotes_are_not_cached(self, clock: ManualClock):
        """
        GIVEN the provider is unreachable
        WHEN the same symbol is requested twice
        THEN the provider is asked both times
        """
        provider = UnavailableQuoteProvider()
        cache = QuoteCache(provider=provider, clock=clock)

        cache.lookup("MSFT")
        cache.lookup("MSFT")

        assert provider.call_count("MSFT") == 2

    def test_unconfigured_provider_is_never_called(self):
        provider = CountingQuoteProvider(prices={"AAPL": "150.00"}, configured=False)
        cache = QuoteCache(provider=provider)

        result = cache.lookup("AAPL")

        assert isinstance(result, FallbackQuote)
        assert result.reason == QuoteErrorKind.NOT_CONFIGURED
        assert provider.call_count() == 0

    def test_provider_exception_becomes_unavailable(self):
        cache = QuoteCache(provider=RaisingQuoteProvider())

        result = cache.lookup("TSLA")

        assert isinstance(result, FallbackQuote)
        assert result.reason == QuoteErrorKind.UNAVAILABLE

    def test_empty_payload_for_known_symbol_returns_fallback(self):
        cache = QuoteCache(provider=PayloadProvider({"Global Quote": {}}))

        result = cache.lookup("JPM")

        assert isinstance(result, FallbackQuote)
        assert result.reason == QuoteErrorKind.UNKNOWN_SYMBOL
        assert result.quote.exchange == "NYSE"


# =============================================================================
# FAILURE TESTS
# =============================================================================


class TestFailures:
    """Tests for symbols with no live quote and no fallback."""

    def test_blank_symbol_is_invalid(self, quote_cache: QuoteCache):
        result = quote_cache.lookup("   ")

        assert isinstance(result, QuoteFailure)
        assert result.reason == QuoteErrorKind.INVALID_SYMBOL

    def test_get_quote_blank_symbol_raises_stock_not_found(self, quote_cache: QuoteCache):
        with pytest.raises(StockNotFoundError):
            quote_cache.get_quote("")

    def test_unknown_symbol_without_fallback_raises_stock_not_found(
        self,
        quote_cache: QuoteCache,
    ):
        """
        GIVEN the provider returns an empty quote for ZZZZ
        WHEN ZZZZ is requested
        THEN StockNotFoundError is raised
        """
        result = quote_cache.lookup("ZZZZ")

        assert isinstance(result, QuoteFailure)
        assert result.reason == QuoteErrorKind.UNKNOWN_SYMBOL
        with pytest.raises(StockNotFoundError):
            quote_cache.get_quote("ZZZZ")

    def test_garbled_quote_raises_invalid_response(self):
        """A non-empty quote without a usable price is a broken upstream answer."""
        cache = QuoteCache(provider=PayloadProvider({"Global Quote": {"01. symbol": "ZZZZ"}}))

        with pytest.raises(UpstreamInvalidResponseError):
            cache.get_quote("ZZZZ")

    def test_rate_limited_unknown_symbol_raises(self):
        cache = QuoteCache(provider=RateLimitedQuoteProvider())

        with pytest.raises(UpstreamRateLimitedError):
            cache.get_quote("ZZZZ")

    def test_unavailable_unknown_symbol_raises(self):
        cache = QuoteCache(provider=UnavailableQuoteProvider())

        with pytest.raises(UpstreamUnavailableError):
            cache.get_quote("ZZZZ")

    def test_unconfigured_unknown_symbol_raises_configuration_error(self):
        cache = QuoteCache(provider=CountingQuoteProvider(configured=False))

        with pytest.raises(ConfigurationError):
            cache.get_quote("ZZZZ")


# =============================================================================
# PARSING TESTS
# =============================================================================


class TestParsing:
    """Tests for GLOBAL_QUOTE payload decoding."""

    def test_full_payload_is_parsed(self):
        payload = {
            "Global Quote": {
                "01. symbol": "NFLX",
                "05. price": "612.3400",
                "06. volume": "3456789",
                "09. change": "-4.1200",
                "10. change percent": "-0.6683%",
            }
        }
        cache = QuoteCache(provider=PayloadProvider(payload))

        quote = cache.get_quote("NFLX")

        assert quote.symbol == "NFLX"
        assert quote.price == Decimal("612.3400")
        assert quote.change == Decimal("-4.1200")
        assert quote.change_percent == Decimal("-0.6683")
        assert quote.volume == 3456789
        assert quote.display_name == "NFLX"
        assert quote.exchange == "US"

    def test_unparsable_optional_fields_default_to_zero(self):
        payload = {
            "Global Quote": {
                "05. price": "99.50",
                "06. volume": "n/a",
                "09. change": "",
                "10. change percent": "bad%",
            }
        }
        cache = QuoteCache(provider=PayloadProvider(payload))

        quote = cache.get_quote("NFLX")

        assert quote.price == Decimal("99.50")
        assert quote.change == Decimal("0")
        assert quote.change_percent == Decimal("0")
        assert quote.volume == 0

    def test_zero_price_is_an_invalid_response(self):
        """
        GIVEN the provider reports a price of 0
        WHEN the symbol has no fallback
        THEN the response is rejected instead of cached
        """
        provider = PayloadProvider({"Global Quote": {"05. price": "0.0000"}})
        cache = QuoteCache(provider=provider)

        result = cache.lookup("ZZZZ")

        assert isinstance(result, QuoteFailure)
        assert result.reason == QuoteErrorKind.INVALID_RESPONSE

    def test_non_dict_payload_is_invalid(self):
        cache = QuoteCache(provider=PayloadProvider(None))

        with pytest.raises(UpstreamInvalidResponseError):
            cache.get_quote("ZZZZ")


# =============================================================================
# LISTING AND SEARCH TESTS
# =============================================================================


class TestListing:
    """Tests for watch-list listing and search."""

    def test_get_all_quotes_covers_watchlist(self, quote_cache: QuoteCache):
        """Live prices where the provider has them, fallback prices elsewhere."""
        quotes = quote_cache.get_all_quotes()

        assert [q.symbol for q in quotes] == list(WATCHLIST)
        by_symbol = {q.symbol: q for q in quotes}
        assert by_symbol["AAPL"].price == Decimal("150.00")
        assert by_symbol["GOOGL"].price == Decimal("142.75")

    def test_get_all_quotes_skips_failures(self, quote_provider: CountingQuoteProvider):
        cache = QuoteCache(
            provider=quote_provider,
            watchlist=("AAPL", "ZZZZ"),
        )

        quotes = cache.get_all_quotes()

        assert [q.symbol for q in quotes] == ["AAPL"]

    def test_search_matches_symbol_and_name(self, quote_cache: QuoteCache):
        assert [q.symbol for q in quote_cache.search_quotes("msf")] == ["MSFT"]
        assert [q.symbol for q in quote_cache.search_quotes("apple")] == ["AAPL"]

    def test_empty_search_returns_everything(self, quote_cache: QuoteCache):
        assert len(quote_cache.search_quotes("")) == len(WATCHLIST)

"""
Pytest configuration and fixtures for trading simulator tests.

This module provides:
- In-memory SQLite database fixtures
- In-memory record stores
- Counting stub quote providers with settable prices
- A manual clock for cache TTL tests
- A scripted stub for the AI tutor model
- Service fixtures and an API test client with dependency overrides
"""

from decimal import Decimal
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from edustocks.main import app
from edustocks.api import deps
from edustocks.auth import SignedTokenVerifier
from edustocks.config.settings import Settings, reset_settings, set_settings
from edustocks.core.exceptions import ConfigurationError
from edustocks.core.locks import KeyedLock
from edustocks.providers import ProviderUnavailable, RateLimited, RawQuote
from edustocks.repositories import InMemoryRecordStore
from edustocks.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from edustocks.repositories.sqlalchemy import orm_models  # noqa: F401
from edustocks.services import (
    AITrainerService,
    LessonService,
    PortfolioLedger,
    ProgressTracker,
    QuoteCache,
    UserService,
)

TEST_SECRET = "test-secret"


# =============================================================================
# QUOTE PROVIDER FIXTURES
# =============================================================================


def global_quote_payload(
    symbol: str,
    price: str,
    change: str = "1.25",
    change_percent: str = "0.68%",
    volume: str = "1000",
) -> dict:
    """Build an Alpha Vantage GLOBAL_QUOTE payload."""
    return {
        "Global Quote": {
            "01. symbol": symbol,
            "05. price": price,
            "06. volume": volume,
            "09. change": change,
            "10. change percent": change_percent,
        }
    }


class CountingQuoteProvider:
    """
    Deterministic quote provider for testing.

    Prices can be changed between calls; every fetch is counted per symbol.
    Unknown symbols get an empty "Global Quote", like the real API.
    """

    def __init__(self, prices: Optional[dict[str, str]] = None, configured: bool = True):
        self.prices: dict[str, str] = dict(prices or {})
        self.calls: dict[str, int] = {}
        self.configured = configured

    @property
    def is_configured(self) -> bool:
        return self.configured

    def set_price(self, symbol: str, price: str) -> None:
        self.prices[symbol] = price

    def call_count(self, symbol: Optional[str] = None) -> int:
        if symbol is None:
            return sum(self.calls.values())
        return self.calls.get(symbol, 0)

    def fetch_quote(self, symbol: str):
        self.calls[symbol] = self.calls.get(symbol, 0) + 1
        if symbol not in self.prices:
            return RawQuote(payload={"Global Quote": {}})
        return RawQuote(payload=global_quote_payload(symbol, self.prices[symbol]))


class RateLimitedQuoteProvider(CountingQuoteProvider):
    """Provider whose quota is always exhausted."""

    def fetch_quote(self, symbol: str):
        self.calls[symbol] = self.calls.get(symbol, 0) + 1
        return RateLimited("API call frequency exceeded")


class UnavailableQuoteProvider(CountingQuoteProvider):
    """Provider that cannot be reached."""

    def fetch_quote(self, symbol: str):
        self.calls[symbol] = self.calls.get(symbol, 0) + 1
        return ProviderUnavailable("connection refused")


class RaisingQuoteProvider(CountingQuoteProvider):
    """Provider that raises instead of answering."""

    def fetch_quote(self, symbol: str):
        self.calls[symbol] = self.calls.get(symbol, 0) + 1
        raise ConnectionError("Network unavailable")


class ManualClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def quote_provider() -> CountingQuoteProvider:
    """Provider with fixed prices for a few watch-list symbols."""
    return CountingQuoteProvider(
        prices={
            "AAPL": "150.00",
            "MSFT": "378.25",
            "TSLA": "248.75",
        }
    )


@pytest.fixture
def quote_cache(quote_provider, clock) -> QuoteCache:
    """Quote cache with the default TTL and a manual clock."""
    return QuoteCache(provider=quote_provider, cache_ttl_seconds=600, clock=clock)


@pytest.fixture
def uncached_quote_cache(quote_provider) -> QuoteCache:
    """Quote cache that never serves a cached entry, so price changes apply at once."""
    return QuoteCache(provider=quote_provider, cache_ttl_seconds=0)


# =============================================================================
# AI TUTOR FIXTURES
# =============================================================================


class StubTutorClient:
    """
    Tutor model that replays scripted replies.

    Every prompt is recorded; once the script runs out the last reply repeats.
    """

    def __init__(self, replies: Optional[list[str]] = None, configured: bool = True):
        self.replies = list(replies or ["OK"])
        self.prompts: list[str] = []
        self.configured = configured

    @property
    def is_configured(self) -> bool:
        return self.configured

    def generate(self, prompt: str) -> str:
        if not self.configured:
            raise ConfigurationError("AI tutor API key not configured")
        self.prompts.append(prompt)
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


@pytest.fixture
def tutor_client() -> StubTutorClient:
    return StubTutorClient()


@pytest.fixture
def ai_trainer_service(tutor_client) -> AITrainerService:
    return AITrainerService(client=tutor_client)


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def portfolio_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def progress_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(test_engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def user_locks() -> KeyedLock:
    return KeyedLock()


@pytest.fixture
def ledger(portfolio_store, uncached_quote_cache, user_locks) -> PortfolioLedger:
    """Ledger starting every user at $10,000."""
    return PortfolioLedger(
        store=portfolio_store,
        quote_cache=uncached_quote_cache,
        starting_balance=Decimal("10000.0"),
        locks=user_locks,
    )


@pytest.fixture
def progress_tracker(progress_store, user_locks) -> ProgressTracker:
    return ProgressTracker(store=progress_store, locks=user_locks)


@pytest.fixture
def lesson_service(progress_tracker) -> LessonService:
    return LessonService(progress_tracker=progress_tracker)


@pytest.fixture
def user_service(ledger, progress_tracker) -> UserService:
    return UserService(ledger=ledger, progress_tracker=progress_tracker)


@pytest.fixture
def token_verifier() -> SignedTokenVerifier:
    return SignedTokenVerifier(secret_key=TEST_SECRET, max_age_seconds=3600)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(
    uncached_quote_cache,
    ledger,
    progress_tracker,
    lesson_service,
    user_service,
    token_verifier,
    ai_trainer_service,
) -> TestClient:
    """Provide FastAPI test client wired to in-memory services."""
    set_settings(Settings(storage_backend="memory", auth_secret_key=TEST_SECRET))
    deps.reset_dependencies()

    app.dependency_overrides[deps.get_quote_cache] = lambda: uncached_quote_cache
    app.dependency_overrides[deps.get_portfolio_ledger] = lambda: ledger
    app.dependency_overrides[deps.get_progress_tracker] = lambda: progress_tracker
    app.dependency_overrides[deps.get_lesson_service] = lambda: lesson_service
    app.dependency_overrides[deps.get_user_service] = lambda: user_service
    app.dependency_overrides[deps.get_token_verifier] = lambda: token_verifier
    app.dependency_overrides[deps.get_ai_trainer_service] = lambda: ai_trainer_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    deps.reset_dependencies()
    reset_settings()


@pytest.fixture
def auth_headers(token_verifier) -> dict[str, str]:
    """Bearer header for user u1."""
    token = token_verifier.issue_token("u1", "u1@example.com")
    return {"Authorization": f"Bearer {token}"}


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"

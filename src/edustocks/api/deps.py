"""Dependency injection for FastAPI."""

import threading
from decimal import Decimal
from typing import Optional

from fastapi import Depends, Header

from edustocks.auth import SignedTokenVerifier, TokenVerifier, VerifiedUser
from edustocks.config.settings import get_settings
from edustocks.core.exceptions import UnauthenticatedError
from edustocks.core.locks import KeyedLock
from edustocks.domain.models import Portfolio, UserProgress
from edustocks.providers import AlphaVantageQuoteProvider, OpenAITutorClient, TutorClient
from edustocks.repositories import (
    InMemoryRecordStore,
    PortfolioCodec,
    RecordStore,
    UserProgressCodec,
    PORTFOLIO_COLLECTION,
    PROGRESS_COLLECTION,
)
from edustocks.repositories.sqlalchemy import SqlAlchemyRecordStore, get_session_factory
from edustocks.services import (
    AITrainerService,
    LessonService,
    PortfolioLedger,
    ProgressTracker,
    QuoteCache,
    UserService,
)

# Process-wide service instances, built on first use
_lock = threading.Lock()
_user_locks: Optional[KeyedLock] = None
_quote_provider: Optional[AlphaVantageQuoteProvider] = None
_quote_cache: Optional[QuoteCache] = None
_portfolio_store: Optional[RecordStore[Portfolio]] = None
_progress_store: Optional[RecordStore[UserProgress]] = None
_ledger: Optional[PortfolioLedger] = None
_progress_tracker: Optional[ProgressTracker] = None
_lesson_service: Optional[LessonService] = None
_user_service: Optional[UserService] = None
_token_verifier: Optional[TokenVerifier] = None
_tutor_client: Optional[OpenAITutorClient] = None
_ai_trainer_service: Optional[AITrainerService] = None


def _get_user_locks() -> KeyedLock:
    global _user_locks
    with _lock:
        if _user_locks is None:
            _user_locks = KeyedLock()
        return _user_locks


def _build_stores() -> None:
    global _portfolio_store, _progress_store
    settings = get_settings()
    if settings.storage_backend == "memory":
        _portfolio_store = InMemoryRecordStore()
        _progress_store = InMemoryRecordStore()
    else:
        session_factory = get_session_factory()
        _portfolio_store = SqlAlchemyRecordStore(session_factory, PORTFOLIO_COLLECTION, PortfolioCodec())
        _progress_store = SqlAlchemyRecordStore(session_factory, PROGRESS_COLLECTION, UserProgressCodec())


def _get_portfolio_store() -> RecordStore[Portfolio]:
    with _lock:
        if _portfolio_store is None:
            _build_stores()
        return _portfolio_store


def _get_progress_store() -> RecordStore[UserProgress]:
    with _lock:
        if _progress_store is None:
            _build_stores()
        return _progress_store


def get_quote_cache() -> QuoteCache:
    """Provide the shared QuoteCache."""
    global _quote_provider, _quote_cache
    with _lock:
        if _quote_cache is None:
            settings = get_settings()
            _quote_provider = AlphaVantageQuoteProvider(
                api_key=settings.quote_api_key,
                base_url=settings.quote_api_base_url,
                timeout_seconds=settings.quote_fetch_timeout_seconds,
            )
            _quote_cache = QuoteCache(
                provider=_quote_provider,
                cache_ttl_seconds=settings.quote_cache_ttl_seconds,
            )
        return _quote_cache


def get_portfolio_ledger() -> PortfolioLedger:
    """Provide the shared PortfolioLedger."""
    global _ledger
    store = _get_portfolio_store()
    quote_cache = get_quote_cache()
    locks = _get_user_locks()
    with _lock:
        if _ledger is None:
            _ledger = PortfolioLedger(
                store=store,
                quote_cache=quote_cache,
                starting_balance=Decimal(str(get_settings().starting_balance)),
                locks=locks,
            )
        return _ledger


def get_progress_tracker() -> ProgressTracker:
    """Provide the shared ProgressTracker."""
    global _progress_tracker
    store = _get_progress_store()
    locks = _get_user_locks()
    with _lock:
        if _progress_tracker is None:
            _progress_tracker = ProgressTracker(store=store, locks=locks)
        return _progress_tracker


def get_lesson_service() -> LessonService:
    """Provide the shared LessonService."""
    global _lesson_service
    tracker = get_progress_tracker()
    with _lock:
        if _lesson_service is None:
            _lesson_service = LessonService(progress_tracker=tracker)
        return _lesson_service


def get_user_service() -> UserService:
    """Provide the shared UserService."""
    global _user_service
    ledger = get_portfolio_ledger()
    tracker = get_progress_tracker()
    with _lock:
        if _user_service is None:
            _user_service = UserService(ledger=ledger, progress_tracker=tracker)
        return _user_service


def get_token_verifier() -> TokenVerifier:
    """Provide the identity token verifier."""
    global _token_verifier
    with _lock:
        if _token_verifier is None:
            settings = get_settings()
            _token_verifier = SignedTokenVerifier(
                secret_key=settings.auth_secret_key,
                max_age_seconds=settings.auth_token_max_age_seconds,
            )
        return _token_verifier


def get_tutor_client() -> TutorClient:
    """Provide the language model client behind the AI tutor."""
    global _tutor_client
    with _lock:
        if _tutor_client is None:
            settings = get_settings()
            _tutor_client = OpenAITutorClient(
                api_key=settings.tutor_api_key,
                base_url=settings.tutor_api_base_url,
                model=settings.tutor_model,
                max_tokens=settings.tutor_max_tokens,
                timeout_seconds=settings.tutor_timeout_seconds,
            )
        return _tutor_client


def get_ai_trainer_service() -> AITrainerService:
    """Provide the shared AITrainerService."""
    global _ai_trainer_service
    client = get_tutor_client()
    with _lock:
        if _ai_trainer_service is None:
            _ai_trainer_service = AITrainerService(client=client)
        return _ai_trainer_service


def get_current_user(
    authorization: Optional[str] = Header(None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> VerifiedUser:
    """Resolve the caller from an `Authorization: Bearer <token>` header."""
    if not authorization:
        raise UnauthenticatedError()
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthenticatedError()
    return verifier.verify(token)


def close_clients() -> None:
    """Close the outbound HTTP clients, then drop every shared instance."""
    with _lock:
        clients = [c for c in (_quote_provider, _tutor_client) if c is not None]
    for client in clients:
        client.close()
    reset_dependencies()


def reset_dependencies() -> None:
    """Drop all shared instances so they are rebuilt from current settings."""
    global _user_locks, _quote_provider, _quote_cache, _portfolio_store, _progress_store
    global _ledger, _progress_tracker, _lesson_service, _user_service, _token_verifier
    global _tutor_client, _ai_trainer_service
    with _lock:
        _user_locks = None
        _quote_provider = None
        _quote_cache = None
        _portfolio_store = None
        _progress_store = None
        _ledger = None
        _progress_tracker = None
        _lesson_service = None
        _user_service = None
        _token_verifier = None
        _tutor_client = None
        _ai_trainer_service = None

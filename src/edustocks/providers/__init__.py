"""External providers: market quotes and the AI tutor model."""

from edustocks.providers.quote_provider import (
    QuoteProvider,
    ProviderResponse,
    RawQuote,
    RateLimited,
    ProviderUnavailable,
)
from edustocks.providers.alpha_vantage_provider import AlphaVantageQuoteProvider
from edustocks.providers.fallback_quotes import (
    WATCHLIST,
    FALLBACK_QUOTES,
)
from edustocks.providers.tutor_client import TutorClient, OpenAITutorClient

__all__ = [
    "QuoteProvider",
    "ProviderResponse",
    "RawQuote",
    "RateLimited",
    "ProviderUnavailable",
    "AlphaVantageQuoteProvider",
    "WATCHLIST",
    "FALLBACK_QUOTES",
    "TutorClient",
    "OpenAITutorClient",
]

"""View models for service outputs."""

from edustocks.domain.views.quote import (
    Quote,
    CachedQuote,
    LiveQuote,
    FallbackQuote,
    QuoteFailure,
    QuoteLookup,
)

__all__ = [
    "Quote",
    "CachedQuote",
    "LiveQuote",
    "FallbackQuote",
    "QuoteFailure",
    "QuoteLookup",
]

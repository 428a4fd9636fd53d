"""Quote provider protocol and the raw responses it can produce."""

from dataclasses import dataclass
from typing import Any, Protocol, Union


@dataclass(frozen=True)
class RawQuote:
    """Undecoded provider payload. Validation happens in the quote cache."""

    payload: Any


@dataclass(frozen=True)
class RateLimited:
    """Provider refused the call because of its request quota."""

    message: str = ""


@dataclass(frozen=True)
class ProviderUnavailable:
    """Provider could not be reached or answered with a server error."""

    message: str = ""


ProviderResponse = Union[RawQuote, RateLimited, ProviderUnavailable]


class QuoteProvider(Protocol):
    """
    Protocol for market quote providers.

    Implementations translate transport outcomes into a ProviderResponse
    and never decode the quote itself.
    """

    @property
    def is_configured(self) -> bool:
        """True when a credential for the live provider is available."""
        ...

    def fetch_quote(self, symbol: str) -> ProviderResponse:
        """Fetch the latest quote payload for one canonical symbol."""
        ...

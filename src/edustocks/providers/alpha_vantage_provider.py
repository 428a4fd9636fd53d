"""Alpha Vantage GLOBAL_QUOTE provider."""

import logging
from typing import Optional

import httpx

from edustocks.providers.quote_provider import (
    ProviderResponse,
    ProviderUnavailable,
    RateLimited,
    RawQuote,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Alpha Vantage answers quota overruns with HTTP 200 and one of these keys.
_RATE_LIMIT_KEYS = ("Note", "Information")


class AlphaVantageQuoteProvider:
    """Blocking Alpha Vantage client returning raw GLOBAL_QUOTE payloads."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        self._api_key = (api_key or "").strip()
        self._base_url = base_url
        self._timeout = timeout_seconds
        self._client = client or httpx.Client(timeout=timeout_seconds)

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def fetch_quote(self, symbol: str) -> ProviderResponse:
        params = {
            "function": "GLOBAL_QUOTE",
            "symbol": symbol,
            "apikey": self._api_key,
        }
        try:
            response = self._client.get(self._base_url, params=params, timeout=self._timeout)
        except httpx.TimeoutException:
            logger.warning("Alpha Vantage request timed out for %s", symbol)
            return ProviderUnavailable(f"timed out after {self._timeout}s")
        except httpx.HTTPError as exc:
            logger.warning("Alpha Vantage request failed for %s: %s", symbol, exc)
            return ProviderUnavailable(str(exc))

        if response.status_code == 429:
            return RateLimited("HTTP 429")
        if response.status_code >= 400:
            return ProviderUnavailable(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            return RawQuote(payload=None)

        if isinstance(payload, dict):
            for key in _RATE_LIMIT_KEYS:
                if key in payload:
                    return RateLimited(str(payload[key]))
        return RawQuote(payload=payload)

    def close(self) -> None:
        self._client.close()

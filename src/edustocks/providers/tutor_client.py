"""AI tutor text-generation client."""

import logging
from typing import Optional, Protocol

import httpx

from edustocks.core.exceptions import ConfigurationError, TutorUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT_SECONDS = 60.0
SYSTEM_PROMPT = "You are an AI stock learning assistant."


class TutorClient(Protocol):
    """Protocol for the language model behind the AI tutor."""

    @property
    def is_configured(self) -> bool:
        ...

    def generate(self, prompt: str) -> str:
        """Return the model's reply to one user prompt."""
        ...


class OpenAITutorClient:
    """Blocking client for an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 300,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        self._api_key = (api_key or "").strip()
        self._url = f"{base_url.rstrip('/')}/chat/completions"
        self._model = model
        self._max_tokens = max_tokens
        self._timeout = timeout_seconds
        self._client = client or httpx.Client(timeout=timeout_seconds)

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def generate(self, prompt: str) -> str:
        """
        Send `prompt` with the tutor system prompt and return the reply text.

        Raises:
            ConfigurationError: no API key is configured
            TutorUnavailableError: transport failure, error status or empty reply
        """
        if not self.is_configured:
            raise ConfigurationError("AI tutor API key not configured")

        body = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self._max_tokens,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            response = self._client.post(self._url, json=body, headers=headers, timeout=self._timeout)
        except httpx.TimeoutException:
            logger.warning("AI tutor request timed out")
            raise TutorUnavailableError(f"timed out after {self._timeout}s")
        except httpx.HTTPError as exc:
            logger.warning("AI tutor request failed: %s", exc)
            raise TutorUnavailableError(str(exc))

        if response.status_code >= 400:
            logger.warning("AI tutor returned HTTP %d", response.status_code)
            raise TutorUnavailableError(f"HTTP {response.status_code}")

        try:
            payload = response.json()
            content = payload["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            raise TutorUnavailableError("malformed response")
        if not isinstance(content, str) or not content.strip():
            raise TutorUnavailableError("empty response")
        return content.strip()

    def close(self) -> None:
        self._client.close()

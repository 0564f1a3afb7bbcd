"""LLM Service - Chat completion client for the gift endpoint.

This module sends one prompt to an OpenAI-compatible chat completion
endpoint and returns the assistant's reply text.

Interface Contract:
- RecommendationClient.generate(config, system, user) -> str
- Raises ConfigurationError before any network call if the API key is missing
- Raises RequestError on transport failure or non-2xx status
- Raises ResponseFormatError if the body lacks choices[0].message.content
- Single attempt: no retries, no streaming
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from config import MAX_TOKENS, REQUEST_TIMEOUT
from gift_agent.models import EndpointConfig

logger = logging.getLogger(__name__)


class RecommendationError(Exception):
    """Base class for gift generation failures."""
    pass


class ConfigurationError(RecommendationError):
    """Raised when the endpoint config cannot be used (missing API key)."""
    pass


class RequestError(RecommendationError):
    """Raised when the endpoint answers with a failure or can't be reached."""

    def __init__(self, description: str, status_code: int | None = None):
        self.description = description or "unknown error"
        self.status_code = status_code
        super().__init__(f"API请求失败: {self.description}")


class ResponseFormatError(RecommendationError):
    """Raised when a successful response doesn't have the expected shape."""
    pass


def build_payload(model: str, system: str, user: str) -> dict[str, Any]:
    """Build the chat completion request body."""
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        "stream": False,
        "max_tokens": MAX_TOKENS,
        "enable_thinking": False,
    }


def extract_content(data: Any) -> str:
    """Return choices[0].message.content or raise ResponseFormatError."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ResponseFormatError("API返回格式异常") from e
    if not isinstance(content, str):
        raise ResponseFormatError("API返回格式异常")
    return content


class RecommendationClient:
    """Client for a single non-streaming chat completion."""

    def __init__(self, session: requests.Session | None = None, timeout: float | None = REQUEST_TIMEOUT):
        """Initialize with optional HTTP session.

        Args:
            session: requests session to send through. If None, creates one.
            timeout: Passed to requests; None keeps its default.
        """
        self._session = session
        self.timeout = timeout

    @property
    def session(self) -> requests.Session:
        """Lazy create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def generate(self, config: EndpointConfig, system: str, user: str) -> str:
        """Send the prompt and return the assistant's reply text.

        Args:
            config: Endpoint snapshot (url, api_key, model)
            system: System instruction
            user: User message

        Returns:
            str: Raw reply content

        Raises:
            ConfigurationError: If config.api_key is empty
            RequestError: If the request fails or returns a non-2xx status
            ResponseFormatError: If the body isn't the expected JSON shape
        """
        if not config.has_api_key:
            raise ConfigurationError("请先配置API Key")

        headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }
        payload = build_payload(config.model, system, user)

        try:
            response = self.session.post(
                config.url,
                headers=headers,
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("[generate] url=%s transport error: %s", config.url, e)
            raise RequestError(str(e)) from e

        logger.info("[generate] model=%s status=%d", config.model, response.status_code)

        # 2xx only; requests' `ok` also accepts 3xx
        if not 200 <= response.status_code < 300:
            description = response.reason or f"HTTP {response.status_code}"
            raise RequestError(description, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseFormatError(f"API返回格式异常: {e}") from e

        return extract_content(data)

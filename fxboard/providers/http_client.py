"""Thin JSON-over-HTTP client used by the rate providers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests
from requests import Response, Session
from requests.exceptions import JSONDecodeError, RequestException

logger = logging.getLogger(__name__)


class HTTPClientError(RuntimeError):
    """Raised when a request fails or returns an unusable response."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class HTTPClientConfig:
    """Connection settings for one upstream API."""

    base_url: str
    timeout: float = 5.0


class HTTPClient:
    """Issue single GET requests and decode JSON bodies.

    Every call is one round trip; failures are raised immediately and never
    retried. The underlying ``requests.Session`` can be injected, which is how
    tests stub the network.
    """

    def __init__(
        self,
        config: HTTPClientConfig,
        session: Optional[Session] = None,
    ) -> None:
        self._config = config
        self._session = session or requests.Session()

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        url = self._build_url(path)
        try:
            response = self._session.get(url, params=params, timeout=self._config.timeout)
        except RequestException as exc:
            logger.debug("HTTP request to %s failed: %s", url, exc)
            raise HTTPClientError(f"Failed to fetch {url}: {exc}") from exc
        return self._handle_response(response)

    def _build_url(self, path: str) -> str:
        base = self._config.base_url.rstrip("/")
        suffix = path.lstrip("/")
        return f"{base}/{suffix}"

    @staticmethod
    def _handle_response(response: Response) -> Dict[str, Any]:
        status = response.status_code
        if status >= 500:
            raise HTTPClientError(f"Server error {status}", status_code=status)
        if status >= 400:
            raise HTTPClientError(f"Client error {status}: {response.text}", status_code=status)

        try:
            payload = response.json()
        except (JSONDecodeError, ValueError) as exc:
            raise HTTPClientError("Invalid JSON response", status_code=status) from exc

        if not isinstance(payload, dict):
            raise HTTPClientError("Expected a JSON object in response body", status_code=status)
        return payload

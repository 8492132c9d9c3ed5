"""Async HTTP client returning decoded JSON."""

import json
from typing import Any

import httpx
from loguru import logger

from codeforces_browser.domain.exceptions import APIStatusError, NetworkError, PayloadError

DEFAULT_TIMEOUT = 15.0


class AsyncHTTPClient:
    """Thin wrapper over ``httpx.AsyncClient`` mapping failures to FetchError subclasses."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: httpx.AsyncClient | None = None):
        """
        Initialize client.

        Args:
            timeout: Per-request timeout in seconds
            client: Preconfigured httpx client (tests inject a MockTransport here)
        """
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        logger.debug(f"GET {url} params={params}")

        try:
            response = await self._client.get(url, params=params, timeout=self.timeout)
        except httpx.TimeoutException as e:
            logger.error(f"Timed out after {self.timeout}s: {url}")
            raise NetworkError(f"Request to {url} timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error for {url}: {e}")
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.error(f"Unexpected status {response.status_code} for {url}")
            raise APIStatusError(url, response.reason_phrase, response.status_code)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise PayloadError(f"Invalid JSON from {url}: {e}") from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

"""Authenticated JSON transport.

Every outbound request goes through ``RESTTransport.fetch``: it waits for a
flood-control slot, attaches the API key, performs one GET and converts any
failure into a tagged ``FetchOutcome`` instead of raising. Pagination relies
on the tag to tell a failed page apart from the last page.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import ProviderError
from ..pagination.limiter import FloodControl, RateLimiter
from ..pagination.results import FetchOutcome
from .http_client import HTTPClient

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


class RESTTransport:
    """Single authenticated GET, throttled by a rate limiter."""

    def __init__(
        self,
        api_key: str,
        *,
        limiter: RateLimiter | None = None,
        timeout: float | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._limiter = limiter or FloodControl()
        self._http = http or HTTPClient(headers=self.headers, timeout=timeout)

    @property
    def limiter(self) -> RateLimiter:
        return self._limiter

    @property
    def headers(self) -> dict[str, str]:
        return {"Accept": "application/json", API_KEY_HEADER: self._api_key}

    async def fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        min_interval: float | None = None,
    ) -> FetchOutcome:
        """GET ``url`` and return a tagged outcome; never raises on I/O errors."""
        await self._limiter.acquire(min_interval)
        try:
            data = await self._http.get(url, params=params)
        except aiohttp.ClientResponseError as e:
            return self._failed(url, ProviderError(e.message or str(e), status_code=e.status, url=url))
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            return self._failed(url, ProviderError(f"{type(e).__name__}: {e}", url=url))

        if not isinstance(data, dict):
            return self._failed(
                url, ProviderError(f"Expected a JSON object, got {type(data).__name__}", url=url)
            )
        return FetchOutcome(payload=data)

    async def fetch_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        min_interval: float | None = None,
    ) -> dict[str, Any]:
        """GET ``url`` and return the JSON object, or ``{}`` on any failure."""
        outcome = await self.fetch(url, params, min_interval=min_interval)
        return outcome.payload

    def _failed(self, url: str, error: ProviderError) -> FetchOutcome:
        logger.error(
            "transport_error",
            extra={"url": url, "status_code": error.status_code, "error_message": str(error)},
        )
        return FetchOutcome(error=error)

    async def close(self) -> None:
        await self._http.close()

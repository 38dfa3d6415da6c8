"""Authenticated aiohttp session."""

from typing import Any, Dict, Mapping, Optional

import aiohttp


def clean_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop unset (None) query values; aiohttp rejects them."""
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


class HTTPClient:
    """Async JSON GET client carrying default headers on its session."""

    def __init__(
        self,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.headers: Dict[str, str] = dict(headers or {})
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def get(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET ``url`` with the default headers and return the decoded JSON body.

        Raises:
            aiohttp.ClientResponseError: On non-2xx status or non-JSON content type
            aiohttp.ClientError: On connection failures
            ValueError: If the body is not valid JSON
        """
        async with self.session.get(url, params=clean_params(params)) as response:
            response.raise_for_status()
            return await response.json()

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

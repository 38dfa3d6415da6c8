"""Unit tests for RESTTransport.

Tests focus on authentication headers, flood control and error tagging.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from simplehash.runtime.pagination import FloodControl, RateLimiter
from simplehash.runtime.rest import API_KEY_HEADER, HTTPClient, RESTTransport

URL = "https://api.simplehash.com/api/v0/nfts/owners"


@pytest.fixture
def http():
    client = MagicMock(spec=HTTPClient)
    client.get = AsyncMock(return_value={"nfts": [1, 2]})
    client.close = AsyncMock()
    return client


@pytest.fixture
def limiter():
    lim = MagicMock(spec=RateLimiter)
    lim.acquire = AsyncMock()
    return lim


class TestRESTTransport:
    """Test RESTTransport request handling."""

    def test_defaults(self):
        transport = RESTTransport("key", timeout=5.0)
        assert isinstance(transport.limiter, FloodControl)
        assert transport._http.timeout.total == 5.0

    def test_headers_carry_api_key(self):
        transport = RESTTransport("secret")
        assert transport.headers[API_KEY_HEADER] == "secret"
        assert transport.headers["Accept"] == "application/json"
        # The HTTP client session carries the same headers on every request
        assert transport._http.headers == transport.headers

    @pytest.mark.asyncio
    async def test_fetch_success(self, http, limiter):
        transport = RESTTransport("secret", limiter=limiter, http=http)

        outcome = await transport.fetch(URL, {"chains": "ethereum"})

        assert outcome.ok
        assert outcome.payload == {"nfts": [1, 2]}
        http.get.assert_called_once_with(URL, params={"chains": "ethereum"})

    @pytest.mark.asyncio
    async def test_fetch_waits_for_limiter_with_override(self, http, limiter):
        transport = RESTTransport("secret", limiter=limiter, http=http)

        await transport.fetch(URL, min_interval=0.3)
        await transport.fetch(URL)

        assert [c.args for c in limiter.acquire.call_args_list] == [(0.3,), (None,)]

    @pytest.mark.asyncio
    async def test_http_status_error_is_tagged(self, http, limiter):
        http.get.side_effect = aiohttp.ClientResponseError(
            MagicMock(), (), status=429, message="Too Many Requests"
        )
        transport = RESTTransport("secret", limiter=limiter, http=http)

        outcome = await transport.fetch(URL)

        assert not outcome.ok
        assert outcome.payload == {}
        assert outcome.error.status_code == 429
        assert outcome.error.url == URL
        assert "Too Many Requests" in str(outcome.error)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [
            aiohttp.ClientConnectionError("connection reset"),
            asyncio.TimeoutError(),
            ValueError("Expecting value"),
        ],
    )
    async def test_transport_errors_are_tagged(self, http, limiter, exc):
        http.get.side_effect = exc
        transport = RESTTransport("secret", limiter=limiter, http=http)

        outcome = await transport.fetch(URL)

        assert not outcome.ok
        assert outcome.payload == {}
        assert outcome.error.status_code is None

    @pytest.mark.asyncio
    async def test_non_object_body_is_tagged(self, http, limiter):
        http.get.return_value = [1, 2, 3]
        transport = RESTTransport("secret", limiter=limiter, http=http)

        outcome = await transport.fetch(URL)

        assert not outcome.ok
        assert "list" in str(outcome.error)

    @pytest.mark.asyncio
    async def test_failures_are_logged(self, http, limiter, caplog):
        http.get.side_effect = aiohttp.ClientConnectionError("boom")
        transport = RESTTransport("secret", limiter=limiter, http=http)

        with caplog.at_level("ERROR", logger="simplehash.runtime.rest.transport"):
            await transport.fetch(URL)

        record = next(r for r in caplog.records if r.getMessage() == "transport_error")
        assert record.url == URL

    @pytest.mark.asyncio
    async def test_fetch_json_returns_empty_object_on_failure(self, http, limiter):
        http.get.side_effect = aiohttp.ClientConnectionError("boom")
        transport = RESTTransport("secret", limiter=limiter, http=http)

        assert await transport.fetch_json(URL) == {}

    @pytest.mark.asyncio
    async def test_close_delegates(self, http, limiter):
        transport = RESTTransport("secret", limiter=limiter, http=http)
        await transport.close()
        http.close.assert_awaited_once()

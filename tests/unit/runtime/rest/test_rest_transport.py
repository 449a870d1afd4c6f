"""Unit tests for RESTTransport error translation."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from artgrid.core import RateLimitError, TransportError
from artgrid.runtime.rest import RESTTransport
from artgrid.utils import HTTPClient


def response_error(status: int, headers: dict | None = None) -> aiohttp.ClientResponseError:
    return aiohttp.ClientResponseError(
        request_info=MagicMock(),
        history=(),
        status=status,
        message="error",
        headers=headers,
    )


@pytest.fixture
def client() -> HTTPClient:
    c = HTTPClient(base_url="https://api.artic.edu")
    c.get = AsyncMock(return_value={"data": []})
    c.close = AsyncMock()
    return c


class TestRESTTransport:
    @pytest.mark.asyncio
    async def test_success_passes_body_through(self, client):
        transport = RESTTransport("https://api.artic.edu", client=client)

        body = await transport.get("/api/v1/artworks", params={"page": 1})

        assert body == {"data": []}
        client.get.assert_awaited_once_with(
            "https://api.artic.edu/api/v1/artworks", params={"page": 1}, headers=None
        )

    @pytest.mark.asyncio
    async def test_http_status_becomes_transport_error(self, client):
        client.get.side_effect = response_error(503)
        transport = RESTTransport("https://api.artic.edu", client=client)

        with pytest.raises(TransportError) as exc_info:
            await transport.get("/api/v1/artworks")

        assert exc_info.value.status_code == 503
        assert not isinstance(exc_info.value, RateLimitError)

    @pytest.mark.asyncio
    async def test_429_becomes_rate_limit_error(self, client):
        client.get.side_effect = response_error(429, headers={"Retry-After": "7"})
        transport = RESTTransport("https://api.artic.edu", client=client)

        with pytest.raises(RateLimitError) as exc_info:
            await transport.get("/api/v1/artworks")

        assert exc_info.value.retry_after == 7
        assert isinstance(exc_info.value, TransportError)

    @pytest.mark.asyncio
    async def test_429_without_header_uses_default(self, client):
        client.get.side_effect = response_error(429)
        transport = RESTTransport("https://api.artic.edu", client=client)

        with pytest.raises(RateLimitError) as exc_info:
            await transport.get("/api/v1/artworks")

        assert exc_info.value.retry_after == 60

    @pytest.mark.asyncio
    async def test_non_json_body(self, client):
        client.get.side_effect = aiohttp.ContentTypeError(MagicMock(), (), status=200, message="text/html")
        transport = RESTTransport("https://api.artic.edu", client=client)

        with pytest.raises(TransportError, match="Invalid JSON"):
            await transport.get("/api/v1/artworks")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()],
    )
    async def test_network_failures(self, client, error):
        client.get.side_effect = error
        transport = RESTTransport("https://api.artic.edu", client=client)

        with pytest.raises(TransportError):
            await transport.get("/api/v1/artworks")

    @pytest.mark.asyncio
    async def test_close_closes_client(self, client):
        transport = RESTTransport("https://api.artic.edu", client=client)
        await transport.close()
        client.close.assert_awaited_once()

"""Unit tests for RestRunner.

Tests focus on endpoint execution, parameter building, and adapter wiring.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from artgrid.runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport


class TestRestRunner:
    """Test RestRunner endpoint execution."""

    @pytest.fixture
    def mock_transport(self):
        transport = MagicMock(spec=RESTTransport)
        transport.get = AsyncMock(return_value={"data": []})
        return transport

    @pytest.fixture
    def runner(self, mock_transport):
        return RestRunner(mock_transport)

    @pytest.fixture
    def mock_adapter(self):
        adapter = MagicMock(spec=ResponseAdapter)
        adapter.parse = MagicMock(return_value={"parsed": "page"})
        return adapter

    @pytest.mark.asyncio
    async def test_run_get_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="artworks",
            method="GET",
            build_path=lambda p: "/api/v1/artworks",
            build_query=lambda p: {"page": p["page_index"], "limit": p["page_size"]},
        )

        result = await runner.run(
            spec=spec, adapter=mock_adapter, params={"page_index": 2, "page_size": 12}
        )

        assert result == {"parsed": "page"}
        mock_transport.get.assert_called_once_with(
            "/api/v1/artworks", params={"page": 2, "limit": 12}, headers=None
        )

    @pytest.mark.asyncio
    async def test_run_with_headers(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="artworks",
            method="get",
            build_path=lambda p: "/api/v1/artworks",
            build_headers=lambda p: {"AIC-User-Agent": p["agent"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"agent": "artgrid"})

        mock_transport.get.assert_called_once_with(
            "/api/v1/artworks", params=None, headers={"AIC-User-Agent": "artgrid"}
        )

    @pytest.mark.asyncio
    async def test_non_get_rejected(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(id="artworks", method="POST", build_path=lambda p: "/x")

        with pytest.raises(ValueError):
            await runner.run(spec=spec, adapter=mock_adapter, params={})
        mock_transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_adapter_receives_params(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(id="artworks", method="GET", build_path=lambda p: "/x")

        await runner.run(spec=spec, adapter=mock_adapter, params={"page_index": 1})

        call_args = mock_adapter.parse.call_args
        assert call_args[0][0] == {"data": []}
        assert call_args[0][1] == {"page_index": 1}

    def test_default_adapter_is_identity(self):
        assert ResponseAdapter().parse({"a": 1}, {}) == {"a": 1}

"""Art Institute of Chicago REST connector.

This connector is the default PageFetcher behind the artwork grid. It issues
one GET per page against the public collection API and turns each response
into a Page.

Architecture:
    This connector uses the endpoint registry to look up specs and adapters,
    then uses RestRunner to execute requests. Transport failures raised by
    RESTTransport propagate unchanged; malformed payloads reported by the
    adapter are re-raised as TransportError so callers only see one error
    kind per page fetch.
"""

from __future__ import annotations

from collections.abc import Sequence
from time import perf_counter
from typing import Any

from artgrid.connectors.artic.config import (
    ARTWORK_FIELDS,
    BASE_URL,
    DEFAULT_TIMEOUT,
    MAX_PAGE_SIZE,
)
from artgrid.core import DataError, PageFetcher, TransportError
from artgrid.models import Page
from artgrid.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class ArticRESTConnector(PageFetcher):
    """Page fetcher backed by the Art Institute of Chicago artworks listing."""

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        fields: Sequence[str] | None = ARTWORK_FIELDS,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the connector.

        Args:
            base_url: API host, overridable for tests and mirrors
            timeout: Total per-request timeout in seconds
            fields: Artwork fields to request; None requests the full record
            transport: Optional pre-built transport
        """
        self._fields = tuple(fields) if fields else ()
        self._transport = transport or RESTTransport(base_url=base_url, timeout=timeout)
        self._runner = RestRunner(self._transport)

    async def fetch_health(self) -> dict[str, object]:
        """Fetch a one-row page to verify connectivity."""
        start = perf_counter()
        page = await self.fetch(1, 1)
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "provider": "artic",
            "status": "ok",
            "latency_ms": latency_ms,
            "total_records": page.total_records,
        }

    async def fetch(self, page_index: int, page_size: int) -> Page:
        """Fetch one page of artworks.

        Args:
            page_index: One-based page index
            page_size: Rows per page (at most MAX_PAGE_SIZE)

        Returns:
            Parsed Page

        Raises:
            TransportError: On network, HTTP or payload failure
            ValueError: On invalid page arguments
        """
        self.validate_page_args(page_index, page_size)
        if page_size > MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be <= {MAX_PAGE_SIZE}, got {page_size}")

        params: dict[str, Any] = {
            "page_index": page_index,
            "page_size": page_size,
            "fields": self._fields,
        }
        return await self.fetch_endpoint("artworks", params)

    async def fetch_endpoint(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a registered endpoint.

        Raises:
            ValueError: If endpoint_id is not found in registry
            TransportError: On any request or parse failure
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        try:
            return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)
        except TransportError:
            raise
        except DataError as e:
            raise TransportError(f"Could not parse {endpoint_id} response: {e}") from e

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

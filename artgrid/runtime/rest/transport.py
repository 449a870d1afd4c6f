"""REST transport translating HTTP failures into library errors."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import aiohttp

from ...core.exceptions import RateLimitError, TransportError
from ...utils.http import HTTPClient


class RESTTransport:
    """Thin REST transport over HTTPClient.

    Every failure a single request can hit (connection errors, timeouts,
    non-2xx statuses, undecodable bodies) surfaces as TransportError so
    callers only deal with one error kind.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        client: HTTPClient | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = client or HTTPClient(base_url=base_url, timeout=timeout)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = self._client.build_url(path)
        try:
            return await self._client.get(url, params=params, headers=headers)
        # ContentTypeError subclasses ClientResponseError, so it must come first
        except (aiohttp.ContentTypeError, json.JSONDecodeError) as e:
            raise TransportError(f"Invalid JSON body from {url}: {e}") from e
        except aiohttp.ClientResponseError as e:
            if e.status == 429:
                retry_after = _parse_retry_after(e.headers)
                raise RateLimitError(f"Rate limited on {url}", retry_after=retry_after) from e
            raise TransportError(f"HTTP {e.status} for {url}: {e.message}", status_code=e.status) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

    async def close(self) -> None:
        await self._client.close()


def _parse_retry_after(headers: Any) -> int:
    """Read Retry-After seconds from response headers, defaulting to 60."""
    if not headers:
        return 60
    value = headers.get("Retry-After")
    try:
        return int(value) if value is not None else 60
    except (TypeError, ValueError):
        return 60

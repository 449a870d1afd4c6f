"""Page fetcher abstract base class.

Architecture:
    This module defines the PageFetcher abstract base class that every data
    source behind the grid must implement. It provides:
    - One abstract operation: fetch a single page by index and size
    - Argument validation shared by all implementations
    - Async context manager support for resource cleanup

Design Decisions:
    - Abstract base class: the selection engine and pagination controller
      depend only on this interface, never on a concrete HTTP connector
    - One request per page: no batching, no prefetching
    - No retry policy: callers decide what to do with a TransportError

See Also:
    - ArticRESTConnector: default implementation backed by the AIC API
    - PaginationController / SelectionEngine: the two consumers
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import Page


class PageFetcher(ABC):
    """Abstract base class for paginated record sources."""

    @abstractmethod
    async def fetch(self, page_index: int, page_size: int) -> Page:
        """Fetch one page of records.

        Args:
            page_index: One-based page index
            page_size: Maximum number of records on the page

        Returns:
            Page whose records length is at most page_size. A page shorter
            than page_size means the dataset is exhausted beyond it.

        Raises:
            TransportError: If the page could not be fetched or parsed
            ValueError: If page_index or page_size is below 1
        """

    async def close(self) -> None:
        """Release underlying resources."""
        return None

    @staticmethod
    def validate_page_args(page_index: int, page_size: int) -> None:
        """Validate fetch arguments."""
        if page_index < 1:
            raise ValueError(f"page_index must be >= 1, got {page_index}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

    async def __aenter__(self) -> PageFetcher:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

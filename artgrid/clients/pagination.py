"""Pagination controller owning the displayed page.

The controller is the only writer of PaginationState. Navigation is explicit:
the view calls ``on_page_index_changed`` (or ``request_page``) and the
controller fetches that page and swaps the whole snapshot on success.

States:
    IDLE -> LOADING on request_page(n)
    LOADING -> IDLE when the latest request completes, successfully or not

Failures are logged and swallowed; the last good page stays displayed.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..connectors.artic.config import DEFAULT_PAGE_SIZE
from ..core import LoadState, PageFetcher, TransportError
from ..models import PaginationState
from .callbacks import Callback, dispatch

logger = logging.getLogger(__name__)


class PaginationController:
    """Loads pages on demand and publishes immutable state snapshots."""

    def __init__(self, fetcher: PageFetcher, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """Initialize controller.

        Args:
            fetcher: Page source
            page_size: Rows per page, fixed for the controller's lifetime
        """
        self._fetcher = fetcher
        self._state = PaginationState(page_size=page_size)
        self._activated = False
        # Monotonic id of the latest navigation; older responses are dropped
        self._request_seq = 0
        self._listeners: list[Callback] = []

    @property
    def state(self) -> PaginationState:
        """Current snapshot. Never mutated in place."""
        return self._state

    @property
    def page_size(self) -> int:
        return self._state.page_size

    @property
    def loading(self) -> bool:
        return self._state.loading

    def subscribe(self, callback: Callback) -> None:
        """Register a listener called with each new PaginationState."""
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    async def activate(self) -> PaginationState:
        """Load the first page once, on first activation."""
        if not self._activated:
            self._activated = True
            await self.request_page(1)
        return self._state

    async def on_page_index_changed(self, page_index: int) -> bool:
        """Handle a page change from the view."""
        return await self.request_page(page_index)

    async def request_page(self, page_index: int) -> bool:
        """Fetch ``page_index`` and make it the displayed page.

        Args:
            page_index: One-based page index

        Returns:
            True if the page was fetched and published, False if the fetch
            failed or a newer request superseded it

        Raises:
            ValueError: If page_index is below 1
        """
        if page_index < 1:
            raise ValueError(f"page_index must be >= 1, got {page_index}")

        self._request_seq += 1
        seq = self._request_seq
        await self._publish(replace(self._state, load_state=LoadState.LOADING))

        try:
            page = await self._fetcher.fetch(page_index, self._state.page_size)
        except TransportError as e:
            logger.warning(
                "page_load_failed",
                extra={
                    "page_index": page_index,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            if seq == self._request_seq:
                await self._publish(replace(self._state, load_state=LoadState.IDLE))
            return False
        except Exception:
            if seq == self._request_seq:
                await self._publish(replace(self._state, load_state=LoadState.IDLE))
            raise

        if seq != self._request_seq:
            logger.debug(
                "page_load_superseded",
                extra={"page_index": page_index, "latest_request": self._request_seq},
            )
            return False

        await self._publish(
            PaginationState(
                page_size=self._state.page_size,
                current_page_index=page_index,
                total_records=page.total_records,
                current_page_records=tuple(page.records),
                load_state=LoadState.IDLE,
            )
        )
        return True

    async def _publish(self, state: PaginationState) -> None:
        self._state = state
        await dispatch(self._listeners, state)

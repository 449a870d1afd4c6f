"""Artwork grid binding.

ArtworkGrid is the surface a view talks to. It pairs a PaginationController
(what page is shown) with a SelectionEngine (which rows are selected) over one
PageFetcher, and exposes the two mutating entry points: ``request_page`` and
``select_first``.

Example:
    async with ArtworkGrid() as grid:
        await grid.activate()
        result = await grid.select_first(15)
        print(result.ids)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..connectors.artic import ArticRESTConnector
from ..connectors.artic.config import DEFAULT_PAGE_SIZE, validate_page_size
from ..core import PageFetcher
from ..models import Artwork, PaginationState, SelectionResult
from ..runtime.selection import SelectionEngine, SelectionRequest
from .callbacks import Callback, dispatch
from .pagination import PaginationController


class ArtworkGrid:
    """Paginated artwork grid with count-based cross-page selection."""

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize grid.

        Args:
            fetcher: Page source. Defaults to the Art Institute of Chicago API,
                in which case the grid owns and closes it.
            page_size: Rows per page for the session
        """
        validate_page_size(page_size)
        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher or ArticRESTConnector()
        self._pagination = PaginationController(self._fetcher, page_size=page_size)
        self._engine = SelectionEngine(self._fetcher, lambda: self._pagination.state)
        self._selection_listeners: list[Callback] = []

    # ----------------------
    # Read side
    # ----------------------
    @property
    def state(self) -> PaginationState:
        return self._pagination.state

    @property
    def selection_result(self) -> SelectionResult | None:
        return self._engine.result

    @property
    def selection(self) -> tuple[Artwork, ...]:
        """Currently selected records, empty before any selection."""
        result = self._engine.result
        return result.records if result is not None else ()

    @property
    def loading(self) -> bool:
        """True while a navigation or a selection walk is in flight."""
        return self._pagination.loading or self._engine.running

    @property
    def can_select(self) -> bool:
        """False while a selection walk is running; the select control should be disabled."""
        return not self._engine.running

    # ----------------------
    # Navigation
    # ----------------------
    async def activate(self) -> PaginationState:
        return await self._pagination.activate()

    async def request_page(self, page_index: int) -> bool:
        return await self._pagination.request_page(page_index)

    async def on_page_index_changed(self, page_index: int) -> bool:
        return await self._pagination.on_page_index_changed(page_index)

    # ----------------------
    # Selection
    # ----------------------
    async def select_first(self, target_count: int) -> SelectionResult:
        """Select the first ``target_count`` rows from the displayed page onward.

        Raises:
            ValidationError: If target_count is not a non-negative integer
            SelectionInProgressError: If a walk is already running
        """
        result = await self._engine.select_first(target_count)
        await dispatch(self._selection_listeners, result)
        return result

    async def select_first_from_input(self, raw: Any) -> SelectionResult:
        """Parse the row-count box value and run ``select_first``."""
        request = SelectionRequest.parse(raw)
        return await self.select_first(request.target_count)

    async def set_selection(self, records: Iterable[Artwork]) -> SelectionResult:
        """Replace the selection with rows picked by hand."""
        result = self._engine.replace(tuple(records))
        await dispatch(self._selection_listeners, result)
        return result

    # ----------------------
    # Listeners
    # ----------------------
    def subscribe_state(self, callback: Callback) -> None:
        self._pagination.subscribe(callback)

    def unsubscribe_state(self, callback: Callback) -> None:
        self._pagination.unsubscribe(callback)

    def subscribe_selection(self, callback: Callback) -> None:
        self._selection_listeners.append(callback)

    def unsubscribe_selection(self, callback: Callback) -> None:
        if callback in self._selection_listeners:
            self._selection_listeners.remove(callback)

    # ----------------------
    # Lifecycle
    # ----------------------
    async def close(self) -> None:
        if self._owns_fetcher:
            await self._fetcher.close()

    async def __aenter__(self) -> ArtworkGrid:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

"""Cross-page selection engine.

The engine answers "select the first N rows" when N may reach past the page
on screen. It reuses the displayed page's records, then walks the following
pages one fetch at a time until N rows are collected, a short page shows the
dataset is exhausted, or a fetch fails.
"""

from __future__ import annotations

from collections.abc import Callable
from time import perf_counter

from ...core import PageFetcher, SelectionInProgressError, SelectionOutcome, TransportError
from ...models import Artwork, PaginationState, SelectionResult
from .definitions import SelectionRequest
from .telemetry import (
    log_selection_complete,
    log_selection_page_error,
    log_selection_page_taken,
    log_selection_started,
)

StateReader = Callable[[], PaginationState]


class SelectionEngine:
    """Selects leading rows across pages, fetching missing pages on demand.

    The engine never writes pagination state. It reads one snapshot through
    ``read_state`` when a walk starts and works from that snapshot only, so a
    navigation finishing mid-walk does not change what the walk sees.
    """

    def __init__(self, fetcher: PageFetcher, read_state: StateReader) -> None:
        """Initialize selection engine.

        Args:
            fetcher: Source of the pages following the displayed one
            read_state: Returns the current pagination snapshot
        """
        self._fetcher = fetcher
        self._read_state = read_state
        self._result: SelectionResult | None = None
        self._running = False

    @property
    def result(self) -> SelectionResult | None:
        """Last published selection, or None before the first walk."""
        return self._result

    @property
    def running(self) -> bool:
        return self._running

    async def select_first(self, target_count: int) -> SelectionResult:
        """Select the first ``target_count`` rows starting at the displayed page.

        Fetch failures do not raise: the walk stops and the rows collected
        before the failed page are published with outcome FAILED.

        Args:
            target_count: Non-negative number of rows to select

        Returns:
            The published SelectionResult, which replaces any earlier one

        Raises:
            ValidationError: If target_count is not a non-negative integer
            SelectionInProgressError: If another walk has not finished
        """
        request = SelectionRequest.parse(target_count)
        if self._running:
            raise SelectionInProgressError("A selection is already in progress")

        self._running = True
        try:
            result = await self._walk(request.target_count)
        finally:
            self._running = False

        self._result = result
        return result

    def replace(self, records: list[Artwork] | tuple[Artwork, ...]) -> SelectionResult:
        """Publish an explicit selection, e.g. rows toggled by hand in the grid."""
        if self._running:
            raise SelectionInProgressError("A selection is already in progress")
        records = tuple(records)
        self._result = SelectionResult(
            records=records,
            target_count=len(records),
            start_page=self._read_state().current_page_index,
        )
        return self._result

    async def _walk(self, target_count: int) -> SelectionResult:
        started = perf_counter()
        state = self._read_state()
        page_index = state.current_page_index
        page_size = state.page_size

        log_selection_started(
            target_count=target_count,
            start_page=page_index,
            page_size=page_size,
            rows_on_page=len(state.current_page_records),
        )

        collected: list[Artwork] = list(state.current_page_records[:target_count])
        remaining = target_count - len(collected)
        pages_fetched: list[int] = []
        outcome = SelectionOutcome.COMPLETED
        error: str | None = None

        while remaining > 0:
            page_index += 1
            fetch_start = perf_counter()
            try:
                page = await self._fetcher.fetch(page_index, page_size)
            except TransportError as e:
                log_selection_page_error(
                    page_index=page_index,
                    collected=len(collected),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                outcome = SelectionOutcome.FAILED
                error = str(e)
                break

            pages_fetched.append(page_index)
            taken = page.records[:remaining]
            collected.extend(taken)
            remaining -= len(taken)

            log_selection_page_taken(
                page_index=page_index,
                rows_fetched=len(page.records),
                rows_taken=len(taken),
                remaining=remaining,
                latency_ms=(perf_counter() - fetch_start) * 1000.0,
            )

            # A short page ends the dataset whatever the reported total says
            if len(page.records) < page_size:
                if remaining > 0:
                    outcome = SelectionOutcome.EXHAUSTED
                break

        result = SelectionResult(
            records=tuple(collected),
            target_count=target_count,
            outcome=outcome,
            start_page=state.current_page_index,
            pages_fetched=tuple(pages_fetched),
            error=error,
        )
        log_selection_complete(
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return result

"""Structured logging for selection walks.

This module provides telemetry hooks for the selection engine, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from ...models import SelectionResult

logger = logging.getLogger(__name__)


def log_selection_started(
    *,
    target_count: int,
    start_page: int,
    page_size: int,
    rows_on_page: int,
) -> None:
    """Log the start of a selection walk.

    Args:
        target_count: Number of rows requested
        start_page: Page index the walk starts from
        page_size: Rows per page
        rows_on_page: Records available on the displayed page
    """
    logger.info(
        "selection_started",
        extra={
            "target_count": target_count,
            "start_page": start_page,
            "page_size": page_size,
            "rows_on_page": rows_on_page,
        },
    )


def log_selection_page_taken(
    *,
    page_index: int,
    rows_fetched: int,
    rows_taken: int,
    remaining: int,
    latency_ms: float | None = None,
) -> None:
    """Log rows taken from one fetched page.

    Args:
        page_index: Index of the fetched page
        rows_fetched: Records the page held
        rows_taken: Leading records appended to the selection
        remaining: Rows still missing after this page
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "selection_page_taken",
        extra={
            "page_index": page_index,
            "rows_fetched": rows_fetched,
            "rows_taken": rows_taken,
            "remaining": remaining,
            "latency_ms": latency_ms,
        },
    )


def log_selection_page_error(
    *,
    page_index: int,
    collected: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch failure that ended a selection walk.

    Args:
        page_index: Index of the page that failed
        collected: Rows collected before the failure
        error_type: Exception class name
        error_message: Error message
    """
    logger.error(
        "selection_page_error",
        extra={
            "page_index": page_index,
            "collected": collected,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_selection_complete(
    *,
    result: SelectionResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a selection walk."""
    logger.info(
        "selection_complete",
        extra={
            "target_count": result.target_count,
            "selected": len(result.records),
            "outcome": result.outcome.value,
            "start_page": result.start_page,
            "pages_fetched": list(result.pages_fetched),
            "total_latency_ms": total_latency_ms,
        },
    )

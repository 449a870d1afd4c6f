"""Enumerations shared across the library."""

from __future__ import annotations

from enum import Enum


class LoadState(str, Enum):
    """Loading state of the pagination controller."""

    IDLE = "idle"
    LOADING = "loading"


class SelectionOutcome(str, Enum):
    """How a selection walk terminated.

    COMPLETED: the requested number of rows was collected.
    EXHAUSTED: a short page was reached before the target count.
    FAILED: a page fetch failed; the result holds the rows collected before it.
    """

    COMPLETED = "completed"
    EXHAUSTED = "exhausted"
    FAILED = "failed"

"""Listener dispatch shared by the grid clients."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

logger = logging.getLogger(__name__)

Callback = Callable[[Any], Awaitable[None]] | Callable[[Any], None]


async def dispatch(callbacks: Iterable[Callback], payload: Any) -> None:
    """Call every listener with payload, awaiting async ones in order.

    A failing listener is logged and does not stop the others.
    """
    for callback in list(callbacks):
        try:
            outcome = callback(payload)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception:
            logger.exception(
                "listener_error",
                extra={"callback": getattr(callback, "__qualname__", repr(callback))},
            )

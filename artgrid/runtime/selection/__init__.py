"""Cross-page lazy selection.

Architecture:
    The selection layer consists of:
    - definitions.py: SelectionRequest and raw input validation
    - engine.py: SelectionEngine, the sequential page walk
    - telemetry.py: Structured logging

Usage:
    The engine is given a PageFetcher and a callable returning the current
    PaginationState. It reads that state once per walk and never writes it.
"""

from __future__ import annotations

from .definitions import SelectionRequest
from .engine import SelectionEngine, StateReader

__all__ = [
    "SelectionRequest",
    "SelectionEngine",
    "StateReader",
]

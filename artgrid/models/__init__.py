"""Data models for paginated artwork records.

Architecture:
    Wire-level records (Artwork, Page) are Pydantic v2 models, frozen so a
    fetched page cannot be altered after it has been handed to the engine.
    Snapshots published to the view layer (PaginationState, SelectionResult)
    are frozen dataclasses.
"""

from .artwork import Artwork
from .page import Page
from .state import PaginationState, SelectionResult

__all__ = [
    "Artwork",
    "Page",
    "PaginationState",
    "SelectionResult",
]

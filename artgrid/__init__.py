"""artgrid - Paginated artwork grid with cross-page lazy row selection."""

from .clients import ArtworkGrid, PaginationController
from .connectors import ArticRESTConnector
from .core import (
    DataError,
    LoadState,
    PageFetcher,
    ProviderError,
    RateLimitError,
    SelectionInProgressError,
    SelectionOutcome,
    TransportError,
    ValidationError,
)
from .models import Artwork, Page, PaginationState, SelectionResult
from .runtime.selection import SelectionEngine, SelectionRequest

__version__ = "0.1.0"

__all__ = [
    # Core
    "PageFetcher",
    "LoadState",
    "SelectionOutcome",
    # Models
    "Artwork",
    "Page",
    "PaginationState",
    "SelectionResult",
    # Selection
    "SelectionEngine",
    "SelectionRequest",
    # Clients
    "ArtworkGrid",
    "PaginationController",
    # Connectors
    "ArticRESTConnector",
    # Exceptions
    "DataError",
    "ProviderError",
    "TransportError",
    "RateLimitError",
    "ValidationError",
    "SelectionInProgressError",
]

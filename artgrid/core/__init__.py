"""Core components."""

from .base import PageFetcher
from .enums import LoadState, SelectionOutcome
from .exceptions import (
    DataError,
    ProviderError,
    RateLimitError,
    SelectionInProgressError,
    TransportError,
    ValidationError,
)

__all__ = [
    "PageFetcher",
    "LoadState",
    "SelectionOutcome",
    "DataError",
    "ProviderError",
    "TransportError",
    "RateLimitError",
    "ValidationError",
    "SelectionInProgressError",
]

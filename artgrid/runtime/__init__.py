"""Runtime layer: REST execution and cross-page selection."""

from .rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport
from .selection import SelectionEngine, SelectionRequest

__all__ = [
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "SelectionEngine",
    "SelectionRequest",
]

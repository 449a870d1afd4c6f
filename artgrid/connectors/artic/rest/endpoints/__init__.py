"""Art Institute of Chicago REST endpoint registry.

This module exports the endpoint specifications and adapters available
to the REST connector.
"""

from __future__ import annotations

from artgrid.runtime.rest import ResponseAdapter, RestEndpointSpec

from .artworks import SPEC as ArtworksSpec  # noqa: N811
from .artworks import Adapter as ArtworksAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "artworks": (ArtworksSpec, ArtworksAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "artworks")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """List all registered endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = ["get_endpoint_spec", "get_endpoint_adapter", "list_endpoints"]

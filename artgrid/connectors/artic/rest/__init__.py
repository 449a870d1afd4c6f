"""Art Institute of Chicago REST connector and endpoints."""

from .endpoints import get_endpoint_adapter, get_endpoint_spec, list_endpoints
from .provider import ArticRESTConnector

__all__ = [
    "ArticRESTConnector",
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
]

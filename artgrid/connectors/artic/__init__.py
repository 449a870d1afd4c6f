"""Art Institute of Chicago connector implementation."""

from .rest.provider import ArticRESTConnector

__all__ = ["ArticRESTConnector"]

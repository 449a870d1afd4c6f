"""Data source connectors."""

from .artic import ArticRESTConnector

__all__ = ["ArticRESTConnector"]

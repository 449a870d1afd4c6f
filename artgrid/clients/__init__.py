"""View-facing clients: pagination controller and grid binding."""

from .grid import ArtworkGrid
from .pagination import PaginationController

__all__ = ["ArtworkGrid", "PaginationController"]

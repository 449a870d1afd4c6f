"""Art Institute of Chicago API constants.

This module centralizes the URL, paging limits and requested fields used by
the REST connector so the connector itself can stay small and focused.
"""

from __future__ import annotations

BASE_URL = "https://api.artic.edu"
API_PATH_PREFIX = "/api/v1"

# Rows per page shown by the grid, and the sizes the paginator offers
DEFAULT_PAGE_SIZE = 12
PAGE_SIZE_OPTIONS = (5, 12, 25, 50)

# The API rejects larger limits
MAX_PAGE_SIZE = 100

DEFAULT_TIMEOUT = 30.0

# Only the columns the grid renders are requested
ARTWORK_FIELDS = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)


def validate_page_size(page_size: int) -> int:
    """Validate a page size against the API limits.

    Args:
        page_size: Requested rows per page

    Returns:
        The page size unchanged

    Raises:
        ValueError: If page_size is outside 1..MAX_PAGE_SIZE

    Examples:
        >>> validate_page_size(12)
        12
    """
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
    return page_size

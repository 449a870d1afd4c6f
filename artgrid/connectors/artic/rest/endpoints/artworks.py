"""Artworks listing endpoint definition and adapter.

Response shape::

    {
        "pagination": {"total": 129000, "limit": 12, "offset": 0,
                       "total_pages": 10750, "current_page": 1},
        "data": [{"id": 1, "title": "...", ...}, ...]
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from artgrid.connectors.artic.config import API_PATH_PREFIX, ARTWORK_FIELDS
from artgrid.core.exceptions import DataError
from artgrid.models import Artwork, Page
from artgrid.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the artworks listing path."""
    return f"{API_PATH_PREFIX}/artworks"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the artworks listing."""
    query: dict[str, Any] = {
        "page": int(params["page_index"]),
        "limit": int(params["page_size"]),
    }
    fields = params.get("fields", ARTWORK_FIELDS)
    if fields:
        query["fields"] = ",".join(fields)
    return query


# Endpoint specification
SPEC = RestEndpointSpec(
    id="artworks",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing an artworks listing into a Page."""

    def parse(self, response: Any, params: dict[str, Any]) -> Page:
        """Parse an artworks listing response.

        Args:
            response: Decoded JSON body
            params: Request parameters containing page_index and page_size

        Returns:
            Page with the listed artworks and the reported total

        Raises:
            DataError: If the body does not have the expected shape
        """
        if not isinstance(response, dict):
            raise DataError(f"Invalid response format: expected dict, got {type(response)}")

        rows = response.get("data")
        if not isinstance(rows, list):
            raise DataError("Artworks response missing 'data' list")

        pagination = response.get("pagination") or {}
        if not isinstance(pagination, dict):
            raise DataError("Artworks response 'pagination' must be an object")

        try:
            total = int(pagination.get("total", 0) or 0)
            records = [Artwork.model_validate(row) for row in rows]
            return Page(
                page_index=int(params["page_index"]),
                page_size=int(params["page_size"]),
                records=records,
                total_records=total,
            )
        except (PydanticValidationError, TypeError, ValueError) as e:
            raise DataError(f"Invalid artworks payload: {e}") from e

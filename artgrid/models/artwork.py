"""Artwork record data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Artwork(BaseModel):
    """A single artwork row as returned by the collection API.

    Identity is the ``id`` field. Records carry no client-side ordering; their
    position in a page is the only order the grid knows about.
    """

    id: int
    title: str = ""
    place_of_origin: str | None = None
    artist_display: str | None = None
    inscriptions: str | None = None
    date_start: int | None = None
    date_end: int | None = None

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> Any:
        """Untitled works come back as null."""
        return "" if v is None else v

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

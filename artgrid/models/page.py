"""Page data model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .artwork import Artwork


class Page(BaseModel):
    """One page of records fetched from a paginated source.

    ``total_records`` is whatever the source reports for the whole dataset.
    It is kept for display only; exhaustion is signalled by a page holding
    fewer than ``page_size`` records.
    """

    page_index: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    records: list[Artwork] = Field(default_factory=list)
    total_records: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_length(self) -> Page:
        """Validate records fit in the page."""
        if len(self.records) > self.page_size:
            raise ValueError(
                f"page holds {len(self.records)} records, more than page_size={self.page_size}"
            )
        return self

    @property
    def is_short(self) -> bool:
        """True if the dataset is exhausted beyond this page."""
        return len(self.records) < self.page_size

    def __len__(self) -> int:
        return len(self.records)

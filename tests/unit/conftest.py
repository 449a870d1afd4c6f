"""Shared fakes for unit tests."""

from __future__ import annotations

import asyncio

import pytest

from artgrid.core import PageFetcher, TransportError
from artgrid.models import Artwork, Page


def make_artworks(count: int, start_id: int = 1) -> list[Artwork]:
    return [
        Artwork(
            id=i,
            title=f"Artwork {i}",
            place_of_origin="France",
            artist_display=f"Artist {i}",
            date_start=1800 + i,
            date_end=1801 + i,
        )
        for i in range(start_id, start_id + count)
    ]


class FakeFetcher(PageFetcher):
    """In-memory paginated source over a fixed list of artworks.

    Pages listed in ``fail_pages`` raise TransportError. Pages listed in
    ``gates`` wait for their event before returning.
    """

    def __init__(
        self,
        total: int,
        *,
        reported_total: int | None = None,
        fail_pages: set[int] | None = None,
    ) -> None:
        self.records = make_artworks(total)
        self.reported_total = total if reported_total is None else reported_total
        self.fail_pages = set(fail_pages or ())
        self.gates: dict[int, asyncio.Event] = {}
        self.calls: list[tuple[int, int]] = []
        self.closed = False

    def page_records(self, page_index: int, page_size: int) -> list[Artwork]:
        start = (page_index - 1) * page_size
        return self.records[start : start + page_size]

    async def fetch(self, page_index: int, page_size: int) -> Page:
        self.validate_page_args(page_index, page_size)
        self.calls.append((page_index, page_size))
        gate = self.gates.get(page_index)
        if gate is not None:
            await gate.wait()
        if page_index in self.fail_pages:
            raise TransportError(f"HTTP 503 for page {page_index}", status_code=503)
        return Page(
            page_index=page_index,
            page_size=page_size,
            records=self.page_records(page_index, page_size),
            total_records=self.reported_total,
        )

    @property
    def fetched_pages(self) -> list[int]:
        return [page_index for page_index, _ in self.calls]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fetcher() -> FakeFetcher:
    """Source with 100 artworks."""
    return FakeFetcher(100)


@pytest.fixture
def make_fetcher() -> type[FakeFetcher]:
    """Factory for sources with custom size and failures."""
    return FakeFetcher

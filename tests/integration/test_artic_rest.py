"""Integration tests against the live Art Institute of Chicago API."""

import pytest

from artgrid import ArticRESTConnector, ArtworkGrid, SelectionOutcome


@pytest.mark.asyncio
async def test_fetch_first_page():
    async with ArticRESTConnector() as connector:
        page = await connector.fetch(1, 12)

    assert page.page_index == 1
    assert len(page.records) == 12
    assert page.total_records > 12
    assert all(record.id for record in page.records)


@pytest.mark.asyncio
async def test_select_across_pages():
    async with ArtworkGrid() as grid:
        await grid.activate()
        first_page_ids = [r.id for r in grid.state.current_page_records]

        result = await grid.select_first(15)

    assert result.outcome == SelectionOutcome.COMPLETED
    assert len(result) == 15
    assert result.ids[:12] == first_page_ids
    assert result.pages_fetched == (2,)

#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from artgrid import ArtworkGrid
from artgrid.connectors.artic.config import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Select the first N artworks from a page of the Art Institute of Chicago API"
    )
    p.add_argument("count", nargs="?", default="15", help="rows to select")
    p.add_argument("page", nargs="?", type=int, default=1, help="page shown before selecting")
    p.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE, choices=PAGE_SIZE_OPTIONS)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    async with ArtworkGrid(page_size=args.page_size) as grid:
        await grid.activate()
        if args.page != 1:
            await grid.on_page_index_changed(args.page)

        state = grid.state
        print("=" * 65)
        print(f"Page       : {state.current_page_index} / {state.total_pages}")
        print(f"Rows shown : {len(state.current_page_records)} of {state.total_records}")

        result = await grid.select_first_from_input(args.count)
        print(f"Selected   : {len(result)} (requested {result.target_count}, {result.outcome.value})")
        print(f"Fetched    : pages {list(result.pages_fetched)}")
        if result.error:
            print(f"Error      : {result.error}")
        print("=" * 65)
        print(f"{'#':>4} | {'ID':>7} | {'Title':40} | {'Origin':15}")
        print("-" * 75)
        for row, artwork in enumerate(result.records, start=state.first + 1):
            print(
                f"{row:>4} | {artwork.id:>7} | {artwork.title[:40]:40} | {(artwork.place_of_origin or '')[:15]:15}"
            )
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())

"""In-process state snapshots published to the view layer."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LoadState, SelectionOutcome
from .artwork import Artwork


@dataclass(frozen=True)
class PaginationState:
    """Immutable snapshot of the displayed page.

    Attributes:
        page_size: Rows per page, fixed for the session
        current_page_index: One-based index of the displayed page
        total_records: Dataset size reported by the last successful fetch
        current_page_records: Records of the displayed page only
        load_state: Whether a navigation fetch is in flight
    """

    page_size: int
    current_page_index: int = 1
    total_records: int = 0
    current_page_records: tuple[Artwork, ...] = ()
    load_state: LoadState = LoadState.IDLE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if self.current_page_index < 1:
            raise ValueError(f"current_page_index must be >= 1, got {self.current_page_index}")
        if len(self.current_page_records) > self.page_size:
            raise ValueError("current_page_records cannot exceed page_size")

    @property
    def first(self) -> int:
        """Zero-based offset of the first displayed row in the whole dataset."""
        return (self.current_page_index - 1) * self.page_size

    @property
    def total_pages(self) -> int:
        """Number of pages implied by the reported total."""
        return -(-self.total_records // self.page_size)

    @property
    def loading(self) -> bool:
        return self.load_state is LoadState.LOADING


@dataclass(frozen=True)
class SelectionResult:
    """Result of a cross-page selection walk.

    Attributes:
        records: Selected records in logical row order
        target_count: Number of rows that was requested
        outcome: Why the walk stopped
        start_page: Page index the walk started from
        pages_fetched: Page indices fetched during the walk, in order
        error: Error message if the walk stopped on a failed fetch
    """

    records: tuple[Artwork, ...] = ()
    target_count: int = 0
    outcome: SelectionOutcome = SelectionOutcome.COMPLETED
    start_page: int = 1
    pages_fetched: tuple[int, ...] = ()
    error: str | None = None

    @property
    def is_short(self) -> bool:
        """True if fewer rows were selected than requested."""
        return len(self.records) < self.target_count

    @property
    def ids(self) -> list[int]:
        return [record.id for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

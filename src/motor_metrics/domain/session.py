from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from motor_metrics.domain.listing import Listing
from motor_metrics.domain.sorting import SortKey


class Phase(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SearchView:
    """
    Read-only snapshot of a search session for presentation.

    ``listings`` is already narrowed to the year range and ordered by
    ``sort_key``. An empty list in the SUCCESS phase means "no vehicles
    found", which is not an error.
    """

    phase: Phase
    listings: list[Listing]
    sort_key: SortKey = SortKey.NONE
    selected_listing: Listing | None = None
    error_message: str | None = None

    @property
    def result_count(self) -> int:
        return len(self.listings)

    @property
    def has_searched(self) -> bool:
        return self.phase is not Phase.IDLE

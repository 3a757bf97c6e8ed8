from __future__ import annotations

import re

from motor_metrics.domain.filters import SearchQuery
from motor_metrics.domain.listing import Listing
from motor_metrics.ports.listing_search_gateway import ListingSearchError, ListingSearchGateway

_NON_ALNUM = re.compile(r"[^0-9a-z]")


def _normalize(value: str) -> str:
    return _NON_ALNUM.sub("", value.lower())


class InMemoryListingSearchGateway(ListingSearchGateway):
    """
    Canonical contract implementation for tests and local runs.

    - Stores listings in insertion order
    - Matches make/model loosely: case, spaces and punctuation are ignored and
      either side may contain the other ("f150" matches "F-150 Lightning")
    - Ignores zip/radius (every stored listing is "nearby")
    - Caps results at query.rows AFTER filtering
    - Never filters on year
    """

    def __init__(self, listings: list[Listing], error: ListingSearchError | None = None) -> None:
        self._listings = listings
        self._error = error
        self.queries: list[SearchQuery] = []

    async def search(self, query: SearchQuery) -> list[Listing]:
        self.queries.append(query)

        if self._error is not None:
            raise self._error

        matches = [listing for listing in self._listings if self._matches(listing, query)]
        return matches[: query.rows]

    def _matches(self, listing: Listing, query: SearchQuery) -> bool:
        if query.make and not _loosely_equal(query.make, listing.build.make):
            return False
        if query.model and not _loosely_equal(query.model, listing.build.model):
            return False
        return True


def _loosely_equal(term: str, value: str) -> bool:
    wanted = _normalize(term)
    actual = _normalize(value)

    if not wanted:
        return True

    return wanted in actual or (bool(actual) and actual in wanted)

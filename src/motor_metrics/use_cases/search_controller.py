"""Search controller use case.

Owns one user's search session: the request lifecycle
(idle -> searching -> success | error), client-side year narrowing of the
server results, the presentation sort key and the listing shown in detail.
"""

from __future__ import annotations

import asyncio
import logging

from motor_metrics.domain.errors import NotFoundError
from motor_metrics.domain.filters import DEFAULT_PAGE_SIZE, FilterSet
from motor_metrics.domain.listing import Listing
from motor_metrics.domain.session import Phase, SearchView
from motor_metrics.domain.sorting import SortKey, sort_listings
from motor_metrics.ports.listing_search_gateway import ListingSearchError, ListingSearchGateway

logger = logging.getLogger(__name__)


class ListingNotFoundError(NotFoundError):
    """Raised when selecting a listing that is not in the current results."""

    def __init__(self, identifier: str | None = None) -> None:
        super().__init__(resource="Listing", identifier=identifier)


class SearchController:
    """
    Single-owner search session state machine.

    Transitions:
    - submit_search: any phase -> SEARCHING (selection, error and previous
      results are cleared immediately). Invalid filters raise and leave the
      state untouched.
    - response: SEARCHING -> SUCCESS with results narrowed to the submitted
      year range
    - failure (ListingSearchError, timeout): SEARCHING -> ERROR, no results
    - select_listing / clear_selection / set_sort_key: phase unchanged

    Ordering: only the most recently submitted search may commit. A newer
    submission cancels the in-flight task and bumps the generation counter,
    so a late response from a superseded search is discarded even if it
    slips past cancellation.

    Must be driven from a single event loop.
    """

    def __init__(
        self,
        gateway: ListingSearchGateway,
        timeout: float | None = 10.0,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """
        Args:
            gateway: Listing search service port
            timeout: Seconds before a search counts as a transport failure
                     (None disables the limit)
            page_size: Maximum listings requested per search
        """
        self._gateway = gateway
        self._timeout = timeout
        self._page_size = page_size

        self._phase = Phase.IDLE
        self._raw_results: list[Listing] = []
        self._filtered_results: list[Listing] = []
        self._sort_key = SortKey.NONE
        self._selected_listing: Listing | None = None
        self._error_message: str | None = None

        self._generation = 0
        self._in_flight: asyncio.Task[None] | None = None

    # ==========================================================================
    # Read-only state
    # ==========================================================================

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def raw_results(self) -> list[Listing]:
        return list(self._raw_results)

    @property
    def filtered_results(self) -> list[Listing]:
        return list(self._filtered_results)

    @property
    def sort_key(self) -> SortKey:
        return self._sort_key

    @property
    def selected_listing(self) -> Listing | None:
        return self._selected_listing

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def view(self) -> SearchView:
        """Snapshot for presentation: filtered results ordered by the sort key."""
        return SearchView(
            phase=self._phase,
            listings=sort_listings(self._filtered_results, self._sort_key),
            sort_key=self._sort_key,
            selected_listing=self._selected_listing,
            error_message=self._error_message,
        )

    # ==========================================================================
    # Operations
    # ==========================================================================

    def submit_search(self, filters: FilterSet) -> asyncio.Task[None]:
        """
        Start a search and move to SEARCHING.

        Must be called while an event loop is running. The returned task
        settles once the response is committed or discarded; callers do not
        have to await it.

        Raises:
            FilterValidationError: If zip is empty or year_min > year_max
        """
        filters.validate()
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        superseded = self._cancel_in_flight()

        self._phase = Phase.SEARCHING
        self._raw_results = []
        self._filtered_results = []
        self._selected_listing = None
        self._error_message = None

        logger.info(
            "Search submitted",
            extra={
                "generation": generation,
                "make": filters.make,
                "model": filters.model,
                "zip": filters.zip,
                "radius": filters.radius,
                "year_min": filters.year_min,
                "year_max": filters.year_max,
                "superseded": superseded,
            },
        )

        task = loop.create_task(self._run_search(generation, filters))
        self._in_flight = task
        return task

    async def search(self, filters: FilterSet) -> SearchView:
        """Submit a search and wait until it settles, returning the resulting view."""
        task = self.submit_search(filters)
        # asyncio.wait does not raise if the task is cancelled by a newer submission
        await asyncio.wait({task})
        return self.view

    def set_sort_key(self, sort_key: SortKey | str) -> None:
        """
        Raises:
            SortKeyValidationError: If a string key is not a known sort key
        """
        self._sort_key = sort_key if isinstance(sort_key, SortKey) else SortKey.parse(sort_key)

    def select_listing(self, listing: Listing) -> None:
        """
        Raises:
            ListingNotFoundError: If listing is not among the current filtered results
        """
        if listing not in self._filtered_results:
            raise ListingNotFoundError(identifier=listing.key or None)
        self._selected_listing = listing

    def select_listing_by_key(self, key: str) -> Listing:
        """
        Select the current result whose id (or VIN when id is empty) is ``key``.

        Raises:
            ListingNotFoundError: If no current result has that key
        """
        for listing in self._filtered_results:
            if listing.key == key:
                self._selected_listing = listing
                return listing
        raise ListingNotFoundError(identifier=key)

    def clear_selection(self) -> None:
        self._selected_listing = None

    def cancel(self) -> None:
        """Abandon any in-flight search; its response will never commit."""
        self._generation += 1
        self._cancel_in_flight()

    # ==========================================================================
    # Internals
    # ==========================================================================

    def _cancel_in_flight(self) -> bool:
        task = self._in_flight
        self._in_flight = None
        if task is None or task.done():
            return False
        task.cancel()
        return True

    async def _run_search(self, generation: int, filters: FilterSet) -> None:
        query = filters.to_query(rows=self._page_size)

        try:
            if self._timeout is None:
                listings = await self._gateway.search(query)
            else:
                listings = await asyncio.wait_for(self._gateway.search(query), self._timeout)
        except asyncio.TimeoutError:
            self._commit_error(generation, f"Search timed out after {self._timeout:g} seconds")
            return
        except ListingSearchError as exc:
            self._commit_error(generation, exc.message)
            return
        except Exception as exc:
            logger.error(
                "Unexpected search failure",
                exc_info=exc,
                extra={"generation": generation, "error_type": type(exc).__name__},
            )
            self._commit_error(generation, "An unexpected error occurred while searching")
            return

        self._commit_success(generation, filters, listings)

    def _is_current(self, generation: int) -> bool:
        if generation == self._generation:
            return True
        logger.warning(
            "Discarding superseded search response",
            extra={"generation": generation, "current_generation": self._generation},
        )
        return False

    def _commit_success(self, generation: int, filters: FilterSet, listings: list[Listing]) -> None:
        if not self._is_current(generation):
            return

        self._raw_results = list(listings)
        self._filtered_results = [
            listing for listing in self._raw_results if filters.matches_year(listing.build.year)
        ]
        self._phase = Phase.SUCCESS
        self._in_flight = None

        logger.info(
            "Search succeeded",
            extra={
                "generation": generation,
                "received": len(self._raw_results),
                "in_year_range": len(self._filtered_results),
            },
        )

    def _commit_error(self, generation: int, message: str) -> None:
        if not self._is_current(generation):
            return

        self._raw_results = []
        self._filtered_results = []
        self._error_message = message
        self._phase = Phase.ERROR
        self._in_flight = None

        logger.warning("Search failed", extra={"generation": generation, "error": message})

from __future__ import annotations

from abc import ABC, abstractmethod

from motor_metrics.domain.errors import UpstreamError
from motor_metrics.domain.filters import SearchQuery
from motor_metrics.domain.listing import Listing


class ListingSearchError(UpstreamError):
    """The search service could not produce a result list."""

    pass


class ListingSearchGateway(ABC):
    """
    Port for the remote listing-search service.

    Contract:
        - query is pre-validated by the caller (SearchController)
        - listings are returned in server order
        - entries without a numeric build year are left out, since the
          client-side year range cannot place them
        - malformed opaque fields (valuation, history, media) decode to
          empty values and never fail the search
        - every failure (non-2xx status, transport error, timeout, bad body)
          is raised as ListingSearchError; nothing else escapes
    """

    @abstractmethod
    async def search(self, query: SearchQuery) -> list[Listing]:
        """
        Run one search against the service.

        Args:
            query: Server-side filters (make, model, zip, radius, rows)

        Returns:
            Listings in the order the service returned them

        Raises:
            ListingSearchError: If the search failed for any reason
        """
        ...

"""HTTP implementation of ListingSearchGateway."""

from __future__ import annotations

import logging

import httpx

from motor_metrics.adapters.listing_payload_mapper import ListingPayloadMapper
from motor_metrics.domain.filters import SearchQuery
from motor_metrics.domain.listing import Listing
from motor_metrics.ports.listing_search_gateway import ListingSearchError, ListingSearchGateway

logger = logging.getLogger(__name__)


class HttpListingSearchGateway(ListingSearchGateway):
    """
    Talks to ``GET {base_url}/api/search``.

    - Sends make/model only when set, always zip/radius/rows
    - Expects ``{"listings": [...]}``; a missing key is an empty result
    - Translates every httpx failure into ListingSearchError

    When no client is injected a short-lived AsyncClient is opened per search.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = f"{base_url.rstrip('/')}/api/search"
        self._timeout = timeout
        self._client = client

    async def search(self, query: SearchQuery) -> list[Listing]:
        params = query.to_params()

        if self._client is not None:
            return await self._search(self._client, params)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._search(client, params)

    async def _search(self, client: httpx.AsyncClient, params: dict[str, str]) -> list[Listing]:
        try:
            response = await client.get(self._endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise ListingSearchError("Search request timed out", endpoint=self._endpoint) from exc
        except httpx.RequestError as exc:
            raise ListingSearchError(
                f"Failed to reach the search service: {exc}", endpoint=self._endpoint
            ) from exc

        if not response.is_success:
            raise ListingSearchError(
                f"Failed to fetch listings: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                endpoint=self._endpoint,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise ListingSearchError("Search service returned an invalid response body") from exc

        if not isinstance(data, dict):
            raise ListingSearchError("Search service returned an invalid response body")

        payloads = data.get("listings") or []
        if not isinstance(payloads, list):
            raise ListingSearchError("Search service returned an invalid response body")

        listings = ListingPayloadMapper.to_domain_list(payloads)
        logger.debug(
            "Search service responded",
            extra={"received": len(payloads), "decoded": len(listings)},
        )
        return listings

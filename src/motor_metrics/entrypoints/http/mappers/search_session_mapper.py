from __future__ import annotations

from motor_metrics.domain.filters import FilterSet, FilterValidationError
from motor_metrics.domain.listing import Listing
from motor_metrics.domain.session import SearchView
from motor_metrics.entrypoints.http.dtos.search_session import (
    BuildDTO,
    ListingCardDTO,
    ListingDetailDTO,
    ListingDetailsDTO,
    PricePointDTO,
    SearchRequestDTO,
    SearchViewDTO,
    ValuationDTO,
)


class SearchSessionMapper:
    """Maps between REST DTOs and domain models for search sessions."""

    @staticmethod
    def to_filter_set(dto: SearchRequestDTO) -> FilterSet:
        """
        Converts the search form to a domain FilterSet.

        Args:
            dto: Search form payload

        Returns:
            FilterSet: Domain filters (not yet validated by the controller)

        Raises:
            FilterValidationError: If a model is given without a make
        """
        make = dto.make.strip()
        model = dto.model.strip()

        if model and not make:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "model",
                        "message": "Choose a make before a model",
                        "code": "DEPENDS_ON_MAKE",
                    }
                ]
            )

        return FilterSet(
            make=make,
            model=model,
            zip=dto.zip,
            radius=dto.radius,
            year_min=dto.year_min,
            year_max=dto.year_max,
        )

    @staticmethod
    def to_listing_card(listing: Listing) -> ListingCardDTO:
        """
        Converts a Listing to the compact card shown in the result grid.

        The card photo is the first live photo, falling back to the first
        cached one.
        """
        details = listing.listing
        photos = details.media.photo_links or details.media.photo_links_cached
        dealer = details.dealer

        return ListingCardDTO(
            key=listing.key,
            heading=details.heading,
            year=listing.build.year,
            make=listing.build.make,
            model=listing.build.model,
            trim=listing.build.trim,
            price=details.price,
            miles=details.miles,
            photo=photos[0] if photos else None,
            dealer_city=(dealer.city or None) if dealer else None,
            dealer_state=(dealer.state or None) if dealer else None,
            is_good_value=listing.valuation.is_good_value,
        )

    @staticmethod
    def to_listing_detail(listing: Listing) -> ListingDetailDTO:
        """Converts a Listing to the full detail payload, nested objects included."""
        return ListingDetailDTO(
            key=listing.key,
            listing=ListingDetailsDTO.model_validate(listing.listing),
            build=BuildDTO.model_validate(listing.build),
            valuation=ValuationDTO.model_validate(listing.valuation),
            price_history=[PricePointDTO.model_validate(point) for point in listing.price_history],
        )

    @staticmethod
    def to_view_response(view: SearchView) -> SearchViewDTO:
        """
        Converts a SearchView snapshot to the REST response.

        Listings keep the order of the view (already sorted).
        """
        return SearchViewDTO(
            phase=view.phase.value,
            sort_key=view.sort_key.value,
            result_count=view.result_count,
            listings=[SearchSessionMapper.to_listing_card(listing) for listing in view.listings],
            selected_listing=(
                SearchSessionMapper.to_listing_detail(view.selected_listing)
                if view.selected_listing is not None
                else None
            ),
            error_message=view.error_message,
        )

"""Decode search-service JSON into domain listings."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from motor_metrics.domain.listing import (
    Build,
    Dealer,
    Extra,
    Listing,
    ListingDetails,
    Media,
    PricePoint,
    Valuation,
)

logger = logging.getLogger(__name__)


class ListingPayloadMapper:
    """
    Maps search-service payloads to Listing entities.

    Optional fields that are missing, null or malformed decode to empty
    values, so one bad listing never fails a whole search. A listing without
    a usable build year cannot take part in year filtering and is dropped.
    """

    @staticmethod
    def to_domain_list(payloads: list[Any]) -> list[Listing]:
        listings = []
        for payload in payloads:
            listing = ListingPayloadMapper.to_domain(payload)
            if listing is not None:
                listings.append(listing)
        return listings

    @staticmethod
    def to_domain(payload: Any) -> Listing | None:
        """
        Convert one ``{listing, build, valuation, price_history}`` object.

        Returns:
            Listing entity, or None if the payload has no build year
        """
        if not isinstance(payload, Mapping):
            logger.warning(
                "Skipping non-object listing payload",
                extra={"payload_type": type(payload).__name__},
            )
            return None

        build = ListingPayloadMapper._build(_section(payload, "build"))
        details = ListingPayloadMapper._details(_section(payload, "listing"))

        if build is None:
            logger.warning(
                "Skipping listing without build year",
                extra={"listing_id": details.id, "vin": details.vin},
            )
            return None

        valuation = _section(payload, "valuation")
        history = payload.get("price_history")
        if not isinstance(history, list):
            history = []

        return Listing(
            listing=details,
            build=build,
            valuation=Valuation(
                is_good_value=bool(valuation.get("is_good_value", False)),
                score=_float(valuation.get("score")) or 0.0,
            ),
            price_history=tuple(
                PricePoint(price=_int(point.get("price")), date=_optional_str(point.get("date")))
                for point in history
                if isinstance(point, Mapping)
            ),
        )

    @staticmethod
    def _details(data: Mapping[str, Any]) -> ListingDetails:
        media = _section(data, "media")
        extra = _section(data, "extra")
        dealer = data.get("dealer")

        return ListingDetails(
            id=_str(data.get("id")),
            vin=_str(data.get("vin")),
            heading=_str(data.get("heading")),
            price=_int(data.get("price")),
            miles=_int(data.get("miles")),
            exterior_color=_str(data.get("exterior_color")),
            interior_color=_str(data.get("interior_color")),
            carfax_1_owner=bool(data.get("carfax_1_owner", False)),
            carfax_clean_title=bool(data.get("carfax_clean_title", False)),
            vdp_url=_str(data.get("vdp_url")),
            msrp=_int(data["msrp"]) if data.get("msrp") is not None else None,
            price_change_percent=_float(data.get("price_change_percent")),
            media=Media(
                photo_links=_strings(media.get("photo_links")),
                photo_links_cached=_strings(media.get("photo_links_cached")),
            ),
            dealer=(
                Dealer(
                    name=_str(dealer.get("name")),
                    city=_str(dealer.get("city")),
                    state=_str(dealer.get("state")),
                    phone=_str(dealer.get("phone")),
                    website=_str(dealer.get("website")),
                )
                if isinstance(dealer, Mapping)
                else None
            ),
            extra=Extra(
                options=_strings(extra.get("options")),
                features=_strings(extra.get("features")),
                high_value_features=_strings(extra.get("high_value_features")),
                options_packages=_strings(extra.get("options_packages")),
                seller_comments=_str(extra.get("seller_comments")),
            ),
        )

    @staticmethod
    def _build(data: Mapping[str, Any]) -> Build | None:
        year = data.get("year")
        if isinstance(year, bool) or not isinstance(year, (int, float)):
            return None

        year = _int(year)
        if not year:
            return None

        return Build(
            year=year,
            make=_str(data.get("make")),
            model=_str(data.get("model")),
            trim=_str(data.get("trim")),
            version=_str(data.get("version")),
            body_type=_str(data.get("body_type")),
            vehicle_type=_str(data.get("vehicle_type")),
            transmission=_str(data.get("transmission")),
            drivetrain=_str(data.get("drivetrain")),
            fuel_type=_str(data.get("fuel_type")),
            doors=_int(data["doors"]) if data.get("doors") else None,
            city_mpg=_int(data.get("city_mpg")),
            highway_mpg=_int(data.get("highway_mpg")),
            powertrain_type=_str(data.get("powertrain_type")),
            std_seating=_str(data.get("std_seating")),
        )


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name)
    return value if isinstance(value, Mapping) else {}


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def _float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _strings(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(item) for item in value if item is not None)

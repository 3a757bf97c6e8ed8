from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Dealer:
    name: str = ""
    city: str = ""
    state: str = ""
    phone: str = ""
    website: str = ""


@dataclass(frozen=True, slots=True)
class Media:
    photo_links: tuple[str, ...] = ()
    photo_links_cached: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Extra:
    options: tuple[str, ...] = ()
    features: tuple[str, ...] = ()
    high_value_features: tuple[str, ...] = ()
    options_packages: tuple[str, ...] = ()
    seller_comments: str = ""


@dataclass(frozen=True, slots=True)
class ListingDetails:
    """Dealer-side facts about one vehicle for sale."""

    id: str = ""
    vin: str = ""
    heading: str = ""
    price: int = 0
    miles: int = 0
    exterior_color: str = ""
    interior_color: str = ""
    carfax_1_owner: bool = False
    carfax_clean_title: bool = False
    vdp_url: str = ""
    msrp: int | None = None
    price_change_percent: float | None = None
    media: Media = field(default_factory=Media)
    dealer: Dealer | None = None
    extra: Extra = field(default_factory=Extra)


@dataclass(frozen=True, slots=True)
class Build:
    year: int
    make: str
    model: str
    trim: str = ""
    version: str = ""
    body_type: str = ""
    vehicle_type: str = ""
    transmission: str = ""
    drivetrain: str = ""
    fuel_type: str = ""
    doors: int | None = None
    city_mpg: int = 0
    highway_mpg: int = 0
    powertrain_type: str = ""
    std_seating: str = ""


@dataclass(frozen=True, slots=True)
class Valuation:
    # Computed by the search service; never interpreted here
    is_good_value: bool = False
    score: float = 0.0


@dataclass(frozen=True, slots=True)
class PricePoint:
    price: int
    date: str | None = None


@dataclass(frozen=True, slots=True)
class Listing:
    """
    One search result: the listing itself plus its build and valuation.

    Only ``build.year``, ``listing.price`` and ``listing.miles`` are read by
    the search controller and sort projection. Everything else is carried
    through untouched for the detail view.
    """

    listing: ListingDetails
    build: Build
    valuation: Valuation = field(default_factory=Valuation)
    price_history: tuple[PricePoint, ...] = ()

    @property
    def key(self) -> str:
        """Unique key: listing id, falling back to the VIN when the id is empty."""
        return self.listing.id or self.listing.vin

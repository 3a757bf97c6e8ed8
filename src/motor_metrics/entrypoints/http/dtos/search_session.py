from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchRequestDTO(BaseModel):
    """Search form submitted for a session."""

    make: str = Field(
        default="",
        description="Make to search for; empty means any make",
        examples=["Ford"],
    )
    model: str = Field(
        default="",
        description="Model to search for; only allowed together with make",
        examples=["F-150"],
    )
    zip: str = Field(
        description="ZIP code the radius is measured from",
        examples=["92617"],
    )
    radius: int = Field(
        default=50,
        description="Search radius in miles",
        examples=[50],
        ge=1,
        le=500,
    )
    year_min: int = Field(
        description="Minimum model year (inclusive)",
        examples=[2018],
        ge=1990,
    )
    year_max: int = Field(
        description="Maximum model year (inclusive), at most next year",
        examples=[2022],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Ford",
                "model": "F-150",
                "zip": "92617",
                "radius": 50,
                "year_min": 2018,
                "year_max": 2022,
            }
        }
    )

    @field_validator("year_max")
    @classmethod
    def year_max_not_past_next_year(cls, value: int) -> int:
        limit = date.today().year + 1
        if value > limit:
            raise ValueError(f"must be <= {limit}")
        return value


class SortRequestDTO(BaseModel):
    sort_key: str = Field(
        description="One of none, miles-asc, miles-desc, price-asc, price-desc, year-asc, year-desc",
        examples=["price-asc"],
    )


class SelectionRequestDTO(BaseModel):
    listing_key: str = Field(
        description="Listing id, or VIN for listings without an id",
        examples=["3TMCZ5AN5KM123456-a1b2"],
        min_length=1,
    )


class DealerDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    city: str
    state: str
    phone: str
    website: str


class MediaDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    photo_links: list[str]
    photo_links_cached: list[str]


class ExtraDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    options: list[str]
    features: list[str]
    high_value_features: list[str]
    options_packages: list[str]
    seller_comments: str


class ListingDetailsDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    vin: str
    heading: str
    price: int
    miles: int
    exterior_color: str
    interior_color: str
    carfax_1_owner: bool
    carfax_clean_title: bool
    vdp_url: str
    msrp: int | None = None
    price_change_percent: float | None = None
    media: MediaDTO
    dealer: DealerDTO | None = None
    extra: ExtraDTO


class BuildDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    make: str
    model: str
    trim: str
    version: str
    body_type: str
    vehicle_type: str
    transmission: str
    drivetrain: str
    fuel_type: str
    doors: int | None = None
    city_mpg: int
    highway_mpg: int
    powertrain_type: str
    std_seating: str


class ValuationDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_good_value: bool
    score: float


class PricePointDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    price: int
    date: str | None = None


class ListingDetailDTO(BaseModel):
    """Everything known about one listing, for the detail view."""

    key: str
    listing: ListingDetailsDTO
    build: BuildDTO
    valuation: ValuationDTO
    price_history: list[PricePointDTO]


class ListingCardDTO(BaseModel):
    """Summary of one listing, for the result grid."""

    key: str
    heading: str
    year: int
    make: str
    model: str
    trim: str
    price: int
    miles: int
    photo: str | None = None
    dealer_city: str | None = None
    dealer_state: str | None = None
    is_good_value: bool


class SearchViewDTO(BaseModel):
    phase: str = Field(description="idle, searching, success or error", examples=["success"])
    sort_key: str = Field(examples=["none"])
    result_count: int
    listings: list[ListingCardDTO]
    selected_listing: ListingDetailDTO | None = None
    error_message: str | None = None


class SessionCreatedDTO(BaseModel):
    session_id: str
    view: SearchViewDTO

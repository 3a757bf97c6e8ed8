from __future__ import annotations

from typing import Callable

import pytest

from motor_metrics.domain.listing import Build, Listing, ListingDetails


ListingFactory = Callable[..., Listing]


@pytest.fixture()
def make_listing() -> ListingFactory:
    """Factory for listings with only the fields a test cares about."""

    def _make(
        id: str = "",
        year: int = 2020,
        price: int = 20000,
        miles: int = 30000,
        make: str = "Ford",
        model: str = "F-150",
        vin: str = "",
    ) -> Listing:
        return Listing(
            listing=ListingDetails(id=id, vin=vin, price=price, miles=miles),
            build=Build(year=year, make=make, model=model),
        )

    return _make

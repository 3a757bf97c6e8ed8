"""Tests for the sort projection."""

from __future__ import annotations

import pytest

from motor_metrics.domain.errors import ValidationError
from motor_metrics.domain.listing import Listing
from motor_metrics.domain.sorting import SortKey, SortKeyValidationError, sort_listings


@pytest.fixture()
def listings(make_listing) -> list[Listing]:
    return [
        make_listing(id="a", price=20000, miles=40000, year=2019),
        make_listing(id="b", price=15000, miles=60000, year=2021),
        make_listing(id="c", price=30000, miles=10000, year=2017),
    ]


def _ids(listings: list[Listing]) -> list[str]:
    return [listing.key for listing in listings]


@pytest.mark.parametrize(
    ("sort_key", "expected"),
    [
        (SortKey.NONE, ["a", "b", "c"]),
        (SortKey.PRICE_ASC, ["b", "a", "c"]),
        (SortKey.PRICE_DESC, ["c", "a", "b"]),
        (SortKey.MILES_ASC, ["c", "a", "b"]),
        (SortKey.MILES_DESC, ["b", "a", "c"]),
        (SortKey.YEAR_ASC, ["c", "a", "b"]),
        (SortKey.YEAR_DESC, ["b", "a", "c"]),
    ],
)
def test_sort_orders(listings: list[Listing], sort_key: SortKey, expected: list[str]) -> None:
    assert _ids(sort_listings(listings, sort_key)) == expected


def test_price_asc_scenario(make_listing) -> None:
    listings = [make_listing(price=20000), make_listing(price=15000), make_listing(price=30000)]

    result = sort_listings(listings, SortKey.PRICE_ASC)

    assert [listing.listing.price for listing in result] == [15000, 20000, 30000]


def test_sort_does_not_mutate_input(listings: list[Listing]) -> None:
    before = list(listings)

    sort_listings(listings, SortKey.PRICE_DESC)

    assert listings == before


def test_sort_returns_new_list_for_none(listings: list[Listing]) -> None:
    result = sort_listings(listings, SortKey.NONE)

    assert result == listings
    assert result is not listings


def test_sort_is_idempotent(listings: list[Listing]) -> None:
    once = sort_listings(listings, SortKey.MILES_ASC)
    twice = sort_listings(once, SortKey.MILES_ASC)

    assert once == twice


@pytest.mark.parametrize("sort_key", [SortKey.PRICE_ASC, SortKey.PRICE_DESC])
def test_ties_keep_incoming_order(make_listing, sort_key: SortKey) -> None:
    listings = [
        make_listing(id="first", price=10000),
        make_listing(id="second", price=10000),
        make_listing(id="third", price=10000),
    ]

    assert _ids(sort_listings(listings, sort_key)) == ["first", "second", "third"]


def test_sort_empty_list() -> None:
    assert sort_listings([], SortKey.YEAR_DESC) == []


# ==============================================================================
# SortKey.parse()
# ==============================================================================


def test_parse_known_key() -> None:
    assert SortKey.parse("price-asc") is SortKey.PRICE_ASC


def test_parse_unknown_key_raises_validation_error() -> None:
    with pytest.raises(SortKeyValidationError) as exc_info:
        SortKey.parse("cheapest")

    assert isinstance(exc_info.value, ValidationError)
    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["field"] == "sort_key"

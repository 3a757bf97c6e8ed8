"""Sort projection over a result list.

Sorting never touches the list it is given; it returns a new list. Python's
sort is stable, so listings with equal keys keep their incoming order.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

from motor_metrics.domain.errors import ValidationError
from motor_metrics.domain.listing import Listing


class SortKeyValidationError(ValidationError):
    """Raised when an unknown sort key is requested."""

    pass


class SortKey(str, Enum):
    NONE = "none"
    MILES_ASC = "miles-asc"
    MILES_DESC = "miles-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    YEAR_ASC = "year-asc"
    YEAR_DESC = "year-desc"

    @classmethod
    def parse(cls, value: str) -> SortKey:
        try:
            return cls(value)
        except ValueError:
            raise SortKeyValidationError(
                errors=[
                    {
                        "field": "sort_key",
                        "message": f"Must be one of {[key.value for key in cls]}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )


_FIELDS: dict[str, Callable[[Listing], float]] = {
    "miles": lambda item: item.listing.miles,
    "price": lambda item: item.listing.price,
    "year": lambda item: item.build.year,
}


def sort_listings(results: Sequence[Listing], sort_key: SortKey) -> list[Listing]:
    """
    Return ``results`` reordered by ``sort_key``.

    Descending keys sort with ``reverse=True``, which keeps ties in their
    original relative order as well.
    """
    if sort_key is SortKey.NONE:
        return list(results)

    field_name, direction = sort_key.value.split("-")
    return sorted(results, key=_FIELDS[field_name], reverse=direction == "desc")

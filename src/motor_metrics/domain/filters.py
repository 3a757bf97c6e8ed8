from __future__ import annotations

from dataclasses import dataclass

from motor_metrics.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


# Upper bound on listings requested from the search service per query
DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """
    What is actually sent to the search service.

    The service filters on make, model and location. Year bounds are
    deliberately absent: they are applied client-side after the response
    arrives (see FilterSet.matches_year).
    """

    zip: str
    radius: int
    rows: int = DEFAULT_PAGE_SIZE
    make: str | None = None
    model: str | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.make:
            params["make"] = self.make
        if self.model:
            params["model"] = self.model
        params["zip"] = self.zip
        params["radius"] = str(self.radius)
        params["rows"] = str(self.rows)
        return params


@dataclass(frozen=True, slots=True)
class FilterSet:
    """
    User search criteria.

    Empty make/model mean "any". Model only narrows anything when a make is
    set as well.
    """

    zip: str
    radius: int
    year_min: int
    year_max: int
    make: str = ""
    model: str = ""

    def validate(self) -> None:
        """
        Validate the guard conditions for submitting a search.

        Only the zip and the year ordering are enforced here; the tighter
        bounds of the input form live in FilterInput.

        Raises:
            FilterValidationError: If the filter set cannot be submitted
        """
        errors = []
        if not self.zip.strip():
            errors.append(
                {"field": "zip", "message": "Must not be empty", "code": "REQUIRED"}
            )
        if self.year_min > self.year_max:
            errors.append(
                {
                    "field": "year_min",
                    "message": "Must be less than or equal to year_max",
                    "code": "INVALID_RANGE",
                }
            )
        if errors:
            raise FilterValidationError(errors=errors)

    def to_query(self, rows: int = DEFAULT_PAGE_SIZE) -> SearchQuery:
        return SearchQuery(
            make=self.make.strip() or None,
            model=self.model.strip() or None,
            zip=self.zip.strip(),
            radius=self.radius,
            rows=rows,
        )

    def matches_year(self, year: int) -> bool:
        return self.year_min <= year <= self.year_max

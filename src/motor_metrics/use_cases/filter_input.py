"""Filter input use case.

Collects the search form fields, keeps the model list in step with the
chosen make and hands a validated FilterSet to the SearchController.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Callable

from motor_metrics.domain.filters import FilterSet, FilterValidationError
from motor_metrics.ports.model_lookup_gateway import ModelLookupError, ModelLookupGateway
from motor_metrics.use_cases.search_controller import SearchController

logger = logging.getLogger(__name__)

MIN_YEAR = 1990
MIN_RADIUS = 1
MAX_RADIUS = 500
DEFAULT_RADIUS = 50


class FilterInput:
    """
    Search form state.

    Model depends on make: set_make() clears the chosen model, drops the
    current model list and cancels any model lookup still in flight before
    starting a new one. Only the lookup for the latest make may fill
    ``available_models``.
    """

    def __init__(
        self,
        controller: SearchController,
        model_lookup: ModelLookupGateway,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._controller = controller
        self._model_lookup = model_lookup
        self._today = today

        self._make = ""
        self._model = ""
        self.zip = ""
        self.radius = DEFAULT_RADIUS
        self.year_min = MIN_YEAR
        self.year_max = self.max_year

        self.available_models: list[str] = []
        self.model_lookup_error: str | None = None
        self._lookup_generation = 0
        self._lookup_task: asyncio.Task[None] | None = None

    @property
    def max_year(self) -> int:
        return self._today().year + 1

    @property
    def make(self) -> str:
        return self._make

    @property
    def model(self) -> str:
        return self._model

    def set_make(self, make: str) -> asyncio.Task[None] | None:
        """
        Choose a make (empty for "any") and refresh the model list.

        Returns:
            The model lookup task, or None when the make was cleared
        """
        self._make = make.strip()
        self._model = ""
        self.available_models = []
        self.model_lookup_error = None

        self._lookup_generation += 1
        if self._lookup_task is not None and not self._lookup_task.done():
            self._lookup_task.cancel()
        self._lookup_task = None

        if not self._make:
            return None

        task = asyncio.get_running_loop().create_task(
            self._load_models(self._lookup_generation, self._make)
        )
        self._lookup_task = task
        return task

    def set_model(self, model: str) -> None:
        """
        Raises:
            FilterValidationError: If a model is given before a make
        """
        model = model.strip()
        if model and not self._make:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "model",
                        "message": "Choose a make before a model",
                        "code": "DEPENDS_ON_MAKE",
                    }
                ]
            )
        self._model = model

    def build_filter_set(self) -> FilterSet:
        """
        Validate the form and produce a FilterSet.

        Raises:
            FilterValidationError: Listing every invalid field
        """
        errors = []

        if not self.zip.strip():
            errors.append({"field": "zip", "message": "Must not be empty", "code": "REQUIRED"})
        if not MIN_RADIUS <= self.radius <= MAX_RADIUS:
            errors.append(
                {
                    "field": "radius",
                    "message": f"Must be between {MIN_RADIUS} and {MAX_RADIUS}",
                    "code": "OUT_OF_RANGE",
                }
            )
        if self.year_min < MIN_YEAR:
            errors.append(
                {
                    "field": "year_min",
                    "message": f"Must be >= {MIN_YEAR}",
                    "code": "OUT_OF_RANGE",
                }
            )
        if self.year_max > self.max_year:
            errors.append(
                {
                    "field": "year_max",
                    "message": f"Must be <= {self.max_year}",
                    "code": "OUT_OF_RANGE",
                }
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

        return FilterSet(
            make=self._make,
            model=self._model,
            zip=self.zip.strip(),
            radius=self.radius,
            year_min=self.year_min,
            year_max=self.year_max,
        )

    def submit(self) -> asyncio.Task[None]:
        """
        Hand the current form to the controller.

        Raises:
            FilterValidationError: If the form is invalid (controller untouched)
        """
        return self._controller.submit_search(self.build_filter_set())

    async def _load_models(self, generation: int, make: str) -> None:
        try:
            models = await self._model_lookup.models_for_make(make)
        except ModelLookupError as exc:
            if generation == self._lookup_generation:
                self.model_lookup_error = exc.message
            logger.warning("Model lookup failed", extra={"make": make, "error": exc.message})
            return

        if generation != self._lookup_generation:
            return

        self.available_models = models
        self._lookup_task = None

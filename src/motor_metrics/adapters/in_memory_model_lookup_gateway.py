from __future__ import annotations

from motor_metrics.ports.model_lookup_gateway import ModelLookupError, ModelLookupGateway


class InMemoryModelLookupGateway(ModelLookupGateway):
    """Model lookup backed by a dict keyed by lower-cased make."""

    def __init__(self, models_by_make: dict[str, list[str]]) -> None:
        self._models = {make.lower(): models for make, models in models_by_make.items()}
        self.lookups: list[str] = []

    async def models_for_make(self, make: str) -> list[str]:
        self.lookups.append(make)

        models = self._models.get(make.strip().lower())
        if models is None:
            raise ModelLookupError(f"No models found for make: {make}", make=make)

        return sorted(set(models))

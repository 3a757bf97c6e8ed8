from __future__ import annotations

from abc import ABC, abstractmethod

from motor_metrics.domain.errors import UpstreamError


class ModelLookupError(UpstreamError):
    """The model lookup service could not resolve models for a make."""

    pass


class ModelLookupGateway(ABC):
    """Port for resolving the models available for a make."""

    @abstractmethod
    async def models_for_make(self, make: str) -> list[str]:
        """
        Raises:
            ModelLookupError: If the lookup failed
        """
        ...

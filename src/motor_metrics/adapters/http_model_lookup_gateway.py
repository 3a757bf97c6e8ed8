"""HTTP implementation of ModelLookupGateway."""

from __future__ import annotations

import httpx

from motor_metrics.ports.model_lookup_gateway import ModelLookupError, ModelLookupGateway


class HttpModelLookupGateway(ModelLookupGateway):
    """
    Talks to ``GET {base_url}/api/models?make=...``.

    Returns the models de-duplicated and sorted alphabetically.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = f"{base_url.rstrip('/')}/api/models"
        self._timeout = timeout
        self._client = client

    async def models_for_make(self, make: str) -> list[str]:
        make = make.strip()
        if not make:
            return []

        if self._client is not None:
            return await self._lookup(self._client, make)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._lookup(client, make)

    async def _lookup(self, client: httpx.AsyncClient, make: str) -> list[str]:
        try:
            response = await client.get(self._endpoint, params={"make": make})
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise ModelLookupError(
                f"Failed to fetch models for {make}: {exc.response.status_code}",
                make=make,
            ) from exc
        except httpx.RequestError as exc:
            raise ModelLookupError(f"Failed to reach the model lookup service: {exc}", make=make) from exc
        except ValueError as exc:
            raise ModelLookupError("Model lookup service returned an invalid response body", make=make) from exc

        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            raise ModelLookupError("Model lookup service returned an invalid response body", make=make)

        return sorted({str(model) for model in models if model})

"""HTTP client for the external disease classifier.

Implements :class:`fever_engine.interfaces.PredictionService` on top of an
``httpx.AsyncClient``.  Transport errors, non-2xx replies and payloads that
do not match the contract are all raised as ``PredictionError``; retries
are left to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError as SchemaError

from fever_engine.errors import PredictionError
from fever_engine.interfaces import PredictionService
from fever_engine.models.prediction import PredictionRequest, PredictionResult

logger = logging.getLogger(__name__)


class HttpPredictionService(PredictionService):
    """POSTs prediction requests to ``url`` and parses the reply.

    Args:
        url: full URL of the predict endpoint (e.g. ``http://ml:7777/predict``)
        timeout: request timeout in seconds
        client: optional pre-built ``httpx.AsyncClient`` (tests inject one
            with a mock transport); when omitted the service owns its client
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def predict(self, request: PredictionRequest) -> PredictionResult:
        try:
            resp = await self._client.post(self._url, json=request.model_dump())
            resp.raise_for_status()
            payload: Any = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("Prediction service returned %d", exc.response.status_code)
            raise PredictionError(
                f"Prediction service returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Prediction service unreachable: %s", exc)
            raise PredictionError(f"Prediction service unreachable: {exc}") from exc
        except ValueError as exc:
            raise PredictionError("Prediction service returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise PredictionError("Prediction service returned a non-object payload")
        try:
            return PredictionResult.from_service(payload)
        except (KeyError, TypeError, ValueError, SchemaError) as exc:
            raise PredictionError(f"Malformed prediction payload: {exc}") from exc

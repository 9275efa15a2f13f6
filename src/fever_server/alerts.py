"""Alert sinks — delivery adapters for engine alert events.

  - LoggingAlertSink: writes the alert to the server log (default when no
    webhook is configured)
  - WebhookAlertSink: POSTs the alert JSON to a webhook with ``httpx``
  - MemoryAlertSink: keeps events in a list (tests, simulations)
"""

from __future__ import annotations

import logging

import httpx

from fever_engine.interfaces import AlertSink
from fever_engine.models.alert import AlertEvent

logger = logging.getLogger(__name__)


class LoggingAlertSink(AlertSink):
    """Logs each alert at warning level."""

    async def publish(self, event: AlertEvent) -> None:
        logger.warning(
            "ALERT [%s] patient=%s episode=%s: %s",
            event.severity,
            event.patient_id,
            event.episode_id,
            event.message,
        )


class MemoryAlertSink(AlertSink):
    """Collects events in memory, in publish order."""

    def __init__(self) -> None:
        self.events: list[AlertEvent] = []

    async def publish(self, event: AlertEvent) -> None:
        self.events.append(event)


class WebhookAlertSink(AlertSink):
    """POSTs each alert as JSON to a webhook URL.

    Non-2xx replies and transport errors propagate as ``httpx`` exceptions;
    the caller decides whether to retry.
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

    async def publish(self, event: AlertEvent) -> None:
        resp = await self._client.post(self._url, json=event.model_dump(mode="json"))
        resp.raise_for_status()
        logger.info("Delivered alert %s to webhook", event.alert_id)

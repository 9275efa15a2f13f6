"""Alert sink tests."""

import json
import logging
from datetime import datetime, timezone

import httpx
import pytest

from fever_engine.models.alert import AlertEvent
from fever_server.alerts import LoggingAlertSink, MemoryAlertSink, WebhookAlertSink


@pytest.fixture
def event():
    return AlertEvent(
        episode_id="ep-1",
        patient_id="patient-1",
        alert_type="danger_sign",
        severity="high",
        message="Danger signs on day 5: bleeding",
        danger_signs=["BLEEDING"],
        urgency="HIGH",
        day_of_illness=5,
        created_at=datetime(2026, 3, 5, 10, 0, tzinfo=timezone.utc),
    )


class TestSinks:
    """Delivery adapters."""

    @pytest.mark.asyncio
    async def test_memory_sink_keeps_order(self, event):
        sink = MemoryAlertSink()
        await sink.publish(event)
        await sink.publish(event.model_copy(update={"alert_id": "second"}))
        assert [e.alert_id for e in sink.events] == [event.alert_id, "second"]

    @pytest.mark.asyncio
    async def test_logging_sink_logs_warning(self, event, caplog):
        with caplog.at_level(logging.WARNING, logger="fever_server.alerts"):
            await LoggingAlertSink().publish(event)
        assert "ALERT [high]" in caplog.text
        assert "ep-1" in caplog.text

    @pytest.mark.asyncio
    async def test_webhook_posts_json(self, event):
        received = []

        def handler(request: httpx.Request) -> httpx.Response:
            received.append(json.loads(request.content))
            return httpx.Response(204)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        await WebhookAlertSink("http://hooks.test/alerts", client=client).publish(event)
        assert received[0]["episode_id"] == "ep-1"
        assert received[0]["danger_signs"] == ["BLEEDING"]
        assert received[0]["created_at"].startswith("2026-03-05T10:00:00")

    @pytest.mark.asyncio
    async def test_webhook_error_propagates(self, event):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda req: httpx.Response(500)),
        )
        with pytest.raises(httpx.HTTPStatusError):
            await WebhookAlertSink("http://hooks.test/alerts", client=client).publish(event)

"""EpisodeTracker — wires the orchestrator to prediction and alert delivery.

The orchestrator is pure; the tracker is the caller that performs the
surrounding I/O in the right order:

    prepare snapshot ──► predict (optional) ──► commit ──► publish alert
         │                    │
         └── rejects ─────────┴── failures propagate; nothing is appended

Usage::

    store = GuidelineStore()
    store.load()
    tracker = EpisodeTracker(
        RiskEscalationOrchestrator(PhaseAdvisor(store)),
        predictor=HttpPredictionService(url),
        alert_sink=LoggingAlertSink(),
    )

    episode = tracker.start_episode("patient-1")
    status = await tracker.log_reading(
        episode, SymptomReading(temperature_f=102.1, time_of_day="evening"),
    )

Concurrent ``log_reading`` calls for the *same* episode must be serialised
by the caller; the tracker holds no locks.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fever_engine.episode import Episode
from fever_engine.illness_day import day_of_illness
from fever_engine.interfaces import AlertSink, PredictionService
from fever_engine.models.history import EpisodeHistory
from fever_engine.models.prediction import PredictionRequest
from fever_engine.models.snapshot import SymptomReading
from fever_engine.models.status import EpisodeInfo, EpisodeStatus
from fever_engine.orchestrator import RiskEscalationOrchestrator

logger = logging.getLogger(__name__)


class EpisodeTracker:
    """Runs episode updates end to end.

    Args:
        orchestrator: a configured :class:`RiskEscalationOrchestrator`
        predictor: optional prediction service; if ``None``, statuses are
            composed without phase guidance or predictor urgency
        alert_sink: optional alert sink; if ``None``, alert-worthy statuses
            are returned but nothing is published
    """

    def __init__(
        self,
        orchestrator: RiskEscalationOrchestrator,
        predictor: PredictionService | None = None,
        alert_sink: AlertSink | None = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._predictor = predictor
        self._alert_sink = alert_sink

    # ==================================================================
    # Episode lifecycle
    # ==================================================================

    def start_episode(
        self,
        patient_id: str,
        *,
        history: EpisodeHistory | None = None,
        started_at: datetime | None = None,
        episode_id: str | None = None,
    ) -> Episode:
        """Open a new ``active`` episode for a patient."""
        episode = Episode(
            patient_id,
            started_at=started_at,
            episode_id=episode_id,
            history=history,
        )
        logger.info("Started episode %s for patient %s", episode.episode_id, patient_id)
        return episode

    def resolve_episode(self, episode: Episode, *, now: datetime | None = None) -> Episode:
        """Close an episode.  Raises ``InvalidStateError`` if already resolved."""
        episode.resolve(now or datetime.now(timezone.utc))
        logger.info(
            "Resolved episode %s after %d readings", episode.episode_id, len(episode.log),
        )
        return episode

    @staticmethod
    def describe(episode: Episode, *, now: datetime | None = None) -> EpisodeInfo:
        """Build the public view of an episode.

        ``current_day`` is counted up to ``now`` for an active episode and
        frozen at ``resolved_at`` once the episode is resolved.
        """
        as_of = episode.resolved_at or now or datetime.now(timezone.utc)
        return EpisodeInfo(
            episode_id=episode.episode_id,
            patient_id=episode.patient_id,
            status=episode.status,
            started_at=episode.started_at,
            resolved_at=episode.resolved_at,
            current_day=day_of_illness(episode.started_at, as_of),
            readings=len(episode.log),
            history=episode.history,
        )

    # ==================================================================
    # Readings
    # ==================================================================

    async def log_reading(
        self,
        episode: Episode,
        reading: SymptomReading,
        *,
        now: datetime | None = None,
        platelet_count: float | None = None,
    ) -> EpisodeStatus:
        """Record one reading and return the composed status.

        Raises:
            InvalidStateError: if the episode is not active
            ValidationError: if the reading is rejected
            PredictionError: if the prediction service fails (the reading
                is not recorded in that case)
        """
        snapshot = self._orchestrator.prepare(episode, reading, now=now)

        prediction = None
        if self._predictor is not None:
            request = PredictionRequest.from_snapshot(
                snapshot, episode.history, platelet_count=platelet_count,
            )
            prediction = await self._predictor.predict(request)
            logger.debug(
                "Prediction for episode %s: %s (%.1f%%)",
                episode.episode_id,
                prediction.disease_label.value,
                prediction.confidence,
            )

        status = self._orchestrator.commit(episode, snapshot, prediction)

        if status.alert_recommended and self._alert_sink is not None:
            event = self._orchestrator.build_alert(episode, status, now=snapshot.recorded_at)
            await self._alert_sink.publish(event)

        return status

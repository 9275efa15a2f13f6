"""RiskEscalationOrchestrator — turns one reading into an EpisodeStatus.

Synchronous and free of I/O.  The only state it touches is the episode's
append-only log.  Fetching a prediction, persisting the status and
delivering alerts are all the caller's job (see :mod:`fever_engine.tracker`).

Per accepted reading:

    0  State check        — only ``active`` episodes accept readings
    1  Validate           — shared vitals/structure validator
    2  Day of illness     — explicit day wins, else computed from start
    3  Classify           — danger signs + fever severity
    4  Append             — snapshot added to the episode log
    5  Prediction (opt.)  — phase guidance + urgency override
    6  Compose            — EpisodeStatus with the alert decision

Steps 0-1 raise before anything is appended, so a rejected reading leaves
the log unchanged.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fever_engine.danger import detect_danger_signs, escalate_urgency, ordered_signs, urgency_rank
from fever_engine.episode import Episode
from fever_engine.errors import InvalidStateError
from fever_engine.illness_day import resolve_day
from fever_engine.models.alert import AlertEvent
from fever_engine.models.enums import Urgency
from fever_engine.models.prediction import PredictionResult
from fever_engine.models.snapshot import SymptomReading, SymptomSnapshot
from fever_engine.models.status import EpisodeStatus
from fever_engine.phase import PhaseAdvisor
from fever_engine.severity import classify_severity
from fever_engine.validator import validate_reading

logger = logging.getLogger(__name__)

# Predictor urgencies that warrant an alert on their own.
_ALERT_URGENCY_RANK = urgency_rank(Urgency.HIGH)
# Urgencies reported with "critical" alert severity.
_CRITICAL_URGENCIES = {Urgency.EMERGENCY, Urgency.CRITICAL}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RiskEscalationOrchestrator:
    """Coordinates validation, classification and guidance for one episode update.

    Args:
        advisor: the :class:`PhaseAdvisor` used when a prediction is supplied
    """

    def __init__(self, advisor: PhaseAdvisor) -> None:
        self._advisor = advisor

    # ==================================================================
    # Public API
    # ==================================================================

    def prepare(
        self,
        episode: Episode,
        reading: SymptomReading,
        *,
        now: datetime | None = None,
    ) -> SymptomSnapshot:
        """Run steps 0-2 and return the snapshot that would be appended.

        Does not modify the episode.  Callers that need the snapshot before
        committing it (e.g. to request a prediction) use this, then
        :meth:`commit`.

        Raises:
            InvalidStateError: if the episode is not active.
            ValidationError: if the reading fails validation.
        """
        self._ensure_active(episode)
        validate_reading(reading)

        recorded_at = now or _utc_now()
        if recorded_at.tzinfo is None:
            recorded_at = recorded_at.replace(tzinfo=timezone.utc)
        day = resolve_day(episode.started_at, recorded_at, reading.day_of_illness)
        return SymptomSnapshot.from_reading(reading, day_of_illness=day, recorded_at=recorded_at)

    def commit(
        self,
        episode: Episode,
        snapshot: SymptomSnapshot,
        prediction: PredictionResult | None = None,
    ) -> EpisodeStatus:
        """Run steps 3-6 for a prepared snapshot and return the status.

        Raises:
            InvalidStateError: if the episode was resolved after
                :meth:`prepare` was called.
        """
        self._ensure_active(episode)

        signs = detect_danger_signs(snapshot)
        severity = classify_severity(snapshot.temperature_f)

        episode.log.append(snapshot)

        guidance = None
        urgency = None
        if prediction is not None:
            guidance = self._advisor.advise(prediction.disease_label, snapshot.day_of_illness)
            urgency = escalate_urgency(prediction.urgency, signs)
        elif signs:
            urgency = escalate_urgency(None, signs)

        alert = bool(signs) or (
            urgency is not None and urgency_rank(urgency) >= _ALERT_URGENCY_RANK
        )

        status = EpisodeStatus(
            episode_id=episode.episode_id,
            episode_status=episode.status,
            snapshot_id=snapshot.snapshot_id,
            current_day=snapshot.day_of_illness,
            temperature_f=snapshot.temperature_f,
            severity_band=severity,
            danger_signs=ordered_signs(signs),
            phase_guidance=guidance,
            alert_recommended=alert,
            effective_urgency=urgency,
        )

        if alert:
            logger.info(
                "Alert recommended for episode %s day %d: signs=%s urgency=%s",
                episode.episode_id,
                status.current_day,
                [s.value for s in status.danger_signs],
                urgency.value if urgency else None,
            )
        return status

    def process(
        self,
        episode: Episode,
        reading: SymptomReading,
        prediction: PredictionResult | None = None,
        *,
        now: datetime | None = None,
    ) -> EpisodeStatus:
        """Validate, append and assess one reading in a single call."""
        snapshot = self.prepare(episode, reading, now=now)
        return self.commit(episode, snapshot, prediction)

    # ==================================================================
    # Alert composition
    # ==================================================================

    @staticmethod
    def build_alert(
        episode: Episode,
        status: EpisodeStatus,
        *,
        now: datetime | None = None,
    ) -> AlertEvent:
        """Compose the alert event for a status with ``alert_recommended`` set.

        Raises:
            ValueError: if the status does not recommend an alert.
        """
        if not status.alert_recommended:
            raise ValueError(
                f"Status for snapshot {status.snapshot_id} does not recommend an alert"
            )

        urgency = status.effective_urgency
        severity = "critical" if urgency in _CRITICAL_URGENCIES else "high"

        if status.danger_signs:
            names = ", ".join(s.value.replace("_", " ").lower() for s in status.danger_signs)
            message = f"Danger signs on day {status.current_day}: {names}"
            alert_type = "danger_sign"
        else:
            message = f"Predicted urgency {urgency.value} on day {status.current_day}"
            alert_type = "urgency"

        return AlertEvent(
            episode_id=episode.episode_id,
            patient_id=episode.patient_id,
            alert_type=alert_type,
            severity=severity,
            message=message,
            danger_signs=list(status.danger_signs),
            urgency=urgency,
            day_of_illness=status.current_day,
            created_at=now or _utc_now(),
        )

    # ==================================================================
    # Internal
    # ==================================================================

    @staticmethod
    def _ensure_active(episode: Episode) -> None:
        if not episode.is_active:
            raise InvalidStateError(
                f"Cannot record a reading: episode {episode.episode_id} is "
                f"'{episode.status.value}', expected 'active'"
            )

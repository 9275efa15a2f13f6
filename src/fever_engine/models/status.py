"""Engine output models — the contract between the engine and its callers.

``EpisodeStatus`` is composed on every accepted reading and handed back to
the caller, which persists it and creates an alert record when
``alert_recommended`` is set.  Field names are snake_case in Python and
camelCase on the wire (``currentDay``, ``severityBand``, ...), matching the
shape downstream storage and alerting already consume.

``TrendPoint`` and ``EpisodeInfo`` are read-side views for API consumers.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fever_engine.models.enums import DangerSign, EpisodeState, SeverityBand, Urgency
from fever_engine.models.history import EpisodeHistory


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PhaseGuidance(_CamelModel):
    """Disease- and day-specific clinical guidance."""

    disease: str
    phase: str
    notes: List[str]


class EpisodeStatus(_CamelModel):
    """Composed status for one accepted reading."""

    episode_id: str
    episode_status: EpisodeState
    snapshot_id: str
    current_day: int
    temperature_f: float
    severity_band: SeverityBand
    # Reported in DangerSign declaration order
    danger_signs: List[DangerSign] = []
    # None when no prediction was supplied or no guideline covers the disease
    phase_guidance: Optional[PhaseGuidance] = None
    alert_recommended: bool = False
    effective_urgency: Optional[Urgency] = None


class TrendPoint(BaseModel):
    """Mean temperature of one day of illness."""

    day: int
    mean_temperature_f: float
    readings: int


class EpisodeInfo(BaseModel):
    """Public view of an episode for API consumers.

    Built from :class:`fever_engine.episode.Episode` but exposes only what
    external callers need.
    """

    episode_id: str
    patient_id: str
    status: EpisodeState
    started_at: datetime
    resolved_at: Optional[datetime] = None
    current_day: int
    readings: int
    history: EpisodeHistory

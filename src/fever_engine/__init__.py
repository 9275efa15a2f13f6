"""fever_engine — fever-episode tracking and risk escalation SDK.

Public API:
    RiskEscalationOrchestrator — validates a reading, classifies it and composes the status
    EpisodeTracker     — async coordinator: orchestrator + prediction + alert delivery
    Episode            — one tracked illness period with its append-only log
    EpisodeLog         — snapshot log with trend / day-detail / latest views
    GuidelineStore     — loads disease-phase YAML tables into typed models
    PhaseAdvisor       — phase guidance lookup by disease and day of illness

Pure rules:
    validate_vitals / validate_reading — physiological bounds
    day_of_illness / resolve_day       — illness-day counter
    classify_severity                  — fever severity band
    detect_danger_signs / escalate_urgency — emergency signs and urgency floor

Collaborator interfaces:
    PredictionService — ABC for the external disease classifier
    AlertSink         — ABC for alert delivery

Errors:
    EpisodeError, ValidationError, InvalidStateError, NotFoundError, PredictionError
"""

from fever_engine.aggregator import EpisodeLog
from fever_engine.danger import detect_danger_signs, escalate_urgency
from fever_engine.episode import Episode
from fever_engine.errors import (
    EpisodeError,
    InvalidStateError,
    NotFoundError,
    PredictionError,
    ValidationError,
)
from fever_engine.guidelines import GuidelineStore
from fever_engine.illness_day import day_of_illness, resolve_day
from fever_engine.interfaces import AlertSink, PredictionService
from fever_engine.orchestrator import RiskEscalationOrchestrator
from fever_engine.phase import PhaseAdvisor
from fever_engine.severity import classify_severity
from fever_engine.tracker import EpisodeTracker
from fever_engine.validator import validate_reading, validate_vitals

__all__ = [
    # Engine & store
    "Episode",
    "EpisodeLog",
    "EpisodeTracker",
    "GuidelineStore",
    "PhaseAdvisor",
    "RiskEscalationOrchestrator",
    # Rules
    "classify_severity",
    "day_of_illness",
    "detect_danger_signs",
    "escalate_urgency",
    "resolve_day",
    "validate_reading",
    "validate_vitals",
    # Interfaces
    "AlertSink",
    "PredictionService",
    # Errors
    "EpisodeError",
    "InvalidStateError",
    "NotFoundError",
    "PredictionError",
    "ValidationError",
]

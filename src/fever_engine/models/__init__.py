"""Public model re-exports for fever_engine.

Consumers should import from ``fever_engine.models`` rather than reaching
into sub-modules directly.
"""

# --- Enums ---
from fever_engine.models.enums import (
    DangerSign,
    DiseaseLabel,
    EpisodeState,
    FoodIntake,
    SeverityBand,
    TimeOfDay,
    Urgency,
    UrineOutput,
    WaterSource,
)

# --- Readings / snapshots ---
from fever_engine.models.history import EpisodeHistory
from fever_engine.models.snapshot import SymptomReading, SymptomSnapshot

# --- Prediction contract ---
from fever_engine.models.prediction import (
    Alternative,
    PredictionRequest,
    PredictionResult,
)

# --- Guideline tables ---
from fever_engine.models.guideline import DiseaseGuideline, PhaseRule

# --- Engine output ---
from fever_engine.models.alert import AlertEvent
from fever_engine.models.status import EpisodeInfo, EpisodeStatus, PhaseGuidance, TrendPoint

__all__ = [
    # Enums
    "DangerSign",
    "DiseaseLabel",
    "EpisodeState",
    "FoodIntake",
    "SeverityBand",
    "TimeOfDay",
    "Urgency",
    "UrineOutput",
    "WaterSource",
    # Readings
    "EpisodeHistory",
    "SymptomReading",
    "SymptomSnapshot",
    # Prediction
    "Alternative",
    "PredictionRequest",
    "PredictionResult",
    # Guidelines
    "DiseaseGuideline",
    "PhaseRule",
    # Output
    "AlertEvent",
    "EpisodeInfo",
    "EpisodeStatus",
    "PhaseGuidance",
    "TrendPoint",
]

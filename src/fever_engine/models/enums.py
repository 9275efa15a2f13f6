"""Enumerations shared by the engine models."""

import enum


class EpisodeState(str, enum.Enum):
    """Lifecycle states for a fever episode.

    Transitions:
        active -> resolved  (explicit close by the caller)
    """

    ACTIVE = "active"
    RESOLVED = "resolved"


class TimeOfDay(str, enum.Enum):
    """Time-of-day slot of a reading; only used for ordering within a day."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class FoodIntake(str, enum.Enum):
    NORMAL = "normal"
    REDUCED = "reduced"
    POOR = "poor"
    NIL = "nil"


class UrineOutput(str, enum.Enum):
    NORMAL = "normal"
    REDUCED = "reduced"
    DARK = "dark"
    BLOODY = "bloody"


class WaterSource(str, enum.Enum):
    FILTERED = "filtered"
    TAP = "tap"
    WELL = "well"
    OUTSIDE = "outside"


class SeverityBand(str, enum.Enum):
    """Fever severity derived from a single temperature reading."""

    NORMAL = "normal"
    MILD = "mild"
    MODERATE = "moderate"
    HIGH = "high"


class DangerSign(str, enum.Enum):
    """Emergency-tier findings.  Declaration order is the reporting order."""

    BLEEDING = "BLEEDING"
    BREATHLESSNESS = "BREATHLESSNESS"
    CONFUSION = "CONFUSION"
    SEVERE_ABDOMINAL_PAIN = "SEVERE_ABDOMINAL_PAIN"
    BLOODY_URINE = "BLOODY_URINE"


class DiseaseLabel(str, enum.Enum):
    """Disease classes the external classifier can return."""

    DENGUE = "Dengue"
    MALARIA = "Malaria"
    TYPHOID = "Typhoid"
    VIRAL = "Viral"
    OTHER = "Other"


class Urgency(str, enum.Enum):
    """Predictor-supplied escalation tier, least to most urgent."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    EMERGENCY = "EMERGENCY"
    CRITICAL = "CRITICAL"

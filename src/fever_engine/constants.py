"""Fever-tracking constants shared across the engine.

These values are referenced by the validator, the classifiers and the
orchestrator.  The temperature breakpoints follow the fever-level badges
used on the patient dashboards (98.6 / 99.5 / 100.4 °F).

A few non-clinical defaults can be overridden via environment variables so
that deployments can adjust them without code changes.
"""

import os

# --- Physiological bounds (inclusive) ---
# Readings outside these ranges are rejected, never clamped.
MIN_TEMPERATURE_F = 95.0
MAX_TEMPERATURE_F = 108.0
MIN_PULSE_RATE = 40
MAX_PULSE_RATE = 180

# Quick-log notes limit (characters).
MAX_NOTES_LENGTH = 1000

# --- Fever severity breakpoints (°F) ---
# Each band's lower bound is exclusive: exactly 98.6 is "normal".
MILD_ABOVE_F = 98.6
MODERATE_ABOVE_F = 99.5
HIGH_ABOVE_F = 100.4

# Fixed ordering of time-of-day slots within one day of illness.
TIME_SLOT_ORDER: dict[str, int] = {
    "morning": 1,
    "afternoon": 2,
    "evening": 3,
    "night": 4,
}

# Urgency tiers ordered from least to most urgent.
# Used to compare the predictor's urgency with the local danger-sign floor.
URGENCY_ORDER: list[str] = ["LOW", "MEDIUM", "HIGH", "EMERGENCY", "CRITICAL"]

# Any danger sign lifts the surfaced urgency to at least this tier.
DANGER_URGENCY_FLOOR = "HIGH"

# Platelet count (×10³/µL) sent to the prediction service when the caller
# has no lab value for the reading.
# Overridable via DEFAULT_PLATELET_COUNT env var.
DEFAULT_PLATELET_COUNT = float(os.getenv("DEFAULT_PLATELET_COUNT", "200"))

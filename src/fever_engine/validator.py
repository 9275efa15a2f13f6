"""Vital reading validation — one routine for every entry path.

Quick-log and daily-log readings both pass through :func:`validate_reading`
before a snapshot is built.  Out-of-range values are rejected with a
``ValidationError``; nothing is clamped.
"""

from __future__ import annotations

from fever_engine.constants import (
    MAX_NOTES_LENGTH,
    MAX_PULSE_RATE,
    MAX_TEMPERATURE_F,
    MIN_PULSE_RATE,
    MIN_TEMPERATURE_F,
)
from fever_engine.errors import ValidationError
from fever_engine.models.snapshot import SymptomReading


def validate_vitals(temperature_f: float | None, pulse_rate: int | None = None) -> None:
    """Check temperature (required) and pulse (optional) against bounds.

    Raises:
        ValidationError: if the temperature is missing or outside
            [95.0, 108.0] °F, or the pulse is present and outside
            [40, 180] bpm.
    """
    if temperature_f is None:
        raise ValidationError("temperature is required")
    if not MIN_TEMPERATURE_F <= temperature_f <= MAX_TEMPERATURE_F:
        raise ValidationError(
            f"temperature must be between {MIN_TEMPERATURE_F} and "
            f"{MAX_TEMPERATURE_F} °F, got {temperature_f}"
        )
    if pulse_rate is not None and not MIN_PULSE_RATE <= pulse_rate <= MAX_PULSE_RATE:
        raise ValidationError(
            f"pulse rate must be between {MIN_PULSE_RATE} and "
            f"{MAX_PULSE_RATE} bpm, got {pulse_rate}"
        )


def validate_reading(reading: SymptomReading) -> None:
    """Validate a full reading: vitals plus the structural fields.

    Raises:
        ValidationError: on the first failing check.
    """
    validate_vitals(reading.temperature_f, reading.pulse_rate)

    if reading.day_of_illness is not None and reading.day_of_illness < 1:
        raise ValidationError(
            f"day of illness must be >= 1, got {reading.day_of_illness}"
        )
    if reading.vomiting and reading.vomiting_count is not None and reading.vomiting_count < 0:
        raise ValidationError(
            f"vomiting count must be >= 0, got {reading.vomiting_count}"
        )
    if reading.notes is not None and len(reading.notes) > MAX_NOTES_LENGTH:
        raise ValidationError(
            f"notes must be at most {MAX_NOTES_LENGTH} characters"
        )

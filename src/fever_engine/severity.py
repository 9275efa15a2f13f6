"""Fever severity classification from a single temperature reading."""

from fever_engine.constants import HIGH_ABOVE_F, MILD_ABOVE_F, MODERATE_ABOVE_F
from fever_engine.models.enums import SeverityBand


def classify_severity(temperature_f: float) -> SeverityBand:
    """Map a temperature (°F) to its severity band.

    Bands are lower-exclusive, so a reading exactly on a breakpoint falls
    into the lower band (98.6 is normal, 99.5 mild, 100.4 moderate).
    """
    if temperature_f > HIGH_ABOVE_F:
        return SeverityBand.HIGH
    if temperature_f > MODERATE_ABOVE_F:
        return SeverityBand.MODERATE
    if temperature_f > MILD_ABOVE_F:
        return SeverityBand.MILD
    return SeverityBand.NORMAL

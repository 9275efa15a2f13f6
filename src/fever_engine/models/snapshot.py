"""Reading and snapshot models — one recorded temperature/symptom check.

Two shapes:
  - SymptomReading: raw caller input (quick log or daily log).  The day of
    illness is optional; the engine derives it when absent.
  - SymptomSnapshot: the immutable record the engine appends to an episode
    log once the reading has been validated.  It carries the resolved day,
    an id and the ``recorded_at`` timestamp.

Snapshots are frozen.  A correction is made by appending a new snapshot,
so the episode trend can always be recomputed by replaying the log.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from fever_engine.models.enums import FoodIntake, TimeOfDay, UrineOutput

# Sub-fields that only carry meaning while their parent flag is set.
_DEPENDENT_FIELDS: dict[str, str] = {
    "rash_location": "rash",
    "bleeding_site": "bleeding",
    "vomiting_count": "vomiting",
}


class SymptomReading(BaseModel):
    """One reading as submitted by the caller, before validation.

    ``temperature_f`` is typed optional so that a missing temperature
    reaches the shared validator and surfaces as a ``ValidationError``
    instead of a schema error.
    """

    model_config = ConfigDict(frozen=True)

    # --- Vitals ---
    temperature_f: Optional[float] = None
    pulse_rate: Optional[int] = None
    time_of_day: Optional[TimeOfDay] = None
    # Explicit day from the daily-log flow; quick logs leave it unset
    day_of_illness: Optional[int] = None

    # --- Symptom checklist ---
    headache: bool = False
    body_pain: bool = False
    rash: bool = False
    rash_location: Optional[str] = None
    bleeding: bool = False
    bleeding_site: Optional[str] = None
    abdominal_pain: bool = False
    vomiting: bool = False
    vomiting_count: Optional[int] = None
    breathlessness: bool = False
    confusion: bool = False
    eye_pain: bool = False
    nausea: bool = False

    # --- Observations ---
    food_intake: FoodIntake = FoodIntake.NORMAL
    urine_output: UrineOutput = UrineOutput.NORMAL
    notes: Optional[str] = None


class SymptomSnapshot(SymptomReading):
    """Validated, immutable reading stored in an episode log."""

    snapshot_id: str
    day_of_illness: int
    recorded_at: datetime

    @classmethod
    def from_reading(
        cls,
        reading: SymptomReading,
        *,
        day_of_illness: int,
        recorded_at: datetime,
        snapshot_id: str | None = None,
    ) -> SymptomSnapshot:
        """Freeze a validated reading into a snapshot.

        Sub-fields whose parent flag is false (e.g. ``bleeding_site`` with
        ``bleeding=False``) are dropped.
        """
        data = reading.model_dump()
        for child, parent in _DEPENDENT_FIELDS.items():
            if not data.get(parent):
                data[child] = None
        data["day_of_illness"] = day_of_illness
        data["recorded_at"] = recorded_at
        data["snapshot_id"] = snapshot_id or uuid.uuid4().hex
        return cls(**data)

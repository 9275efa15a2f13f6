"""Pydantic models for the disease-phase guideline tables.

These models mirror the YAML files in ``fever_engine/data/``:

    disease: Dengue
    source: FeFCon 2024
    phases:
      - phase: Febrile phase
        min_day: 1
        max_day: 3
        notes: [...]

A phase without ``max_day`` is open-ended (e.g. recovery from day 8 on).
"""

from typing import List, Optional

from pydantic import BaseModel, model_validator


class PhaseRule(BaseModel):
    """One phase of an illness, bounded by day of illness (inclusive)."""

    phase: str
    min_day: int = 1
    max_day: Optional[int] = None
    notes: List[str]

    def covers(self, day: int) -> bool:
        if day < self.min_day:
            return False
        return self.max_day is None or day <= self.max_day


class DiseaseGuideline(BaseModel):
    """Phase table for one disease label."""

    disease: str
    source: Optional[str] = None
    phases: List[PhaseRule]

    @model_validator(mode="after")
    def _check_ranges(self) -> "DiseaseGuideline":
        # Phases must be ordered and must not overlap, otherwise a day
        # could map to two different phases.
        ordered = sorted(self.phases, key=lambda p: p.min_day)
        for prev, nxt in zip(ordered, ordered[1:]):
            if prev.max_day is None or prev.max_day >= nxt.min_day:
                raise ValueError(
                    f"{self.disease}: phase '{prev.phase}' overlaps '{nxt.phase}'"
                )
        for rule in ordered:
            if rule.max_day is not None and rule.max_day < rule.min_day:
                raise ValueError(
                    f"{self.disease}: phase '{rule.phase}' has max_day < min_day"
                )
        self.phases = ordered
        return self

"""Prediction models — the request/response contract of the disease classifier.

The classifier runs outside the engine as an HTTP service.  These models
mirror its wire shape so that the engine, the tracker and the HTTP client
share one definition:

    request:  {temperature, fever_days, headache, body_pain, eye_pain,
               nausea_vomiting, abdominal_pain, rash, bleeding,
               platelet_count, mosquito_exposure, travel}   # 0/1 flags
    response: {prediction, confidence, top_3_predictions: [{disease,
               probability}], urgency?, fefcon_recommendation?,
               investigations_needed?, monitoring_plan?, red_flags?,
               input_summary}
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from fever_engine.constants import DEFAULT_PLATELET_COUNT
from fever_engine.models.enums import DiseaseLabel, Urgency
from fever_engine.models.history import EpisodeHistory
from fever_engine.models.snapshot import SymptomSnapshot

# Maximum number of alternatives kept from the classifier's ranking.
MAX_ALTERNATIVES = 3


def _flag(value: bool) -> int:
    return 1 if value else 0


class PredictionRequest(BaseModel):
    """Body POSTed to the prediction service."""

    temperature: float
    fever_days: int
    headache: int = 0
    body_pain: int = 0
    eye_pain: int = 0
    nausea_vomiting: int = 0
    abdominal_pain: int = 0
    rash: int = 0
    bleeding: int = 0
    platelet_count: float = DEFAULT_PLATELET_COUNT
    mosquito_exposure: int = 0
    travel: int = 0

    @classmethod
    def from_snapshot(
        cls,
        snapshot: SymptomSnapshot,
        history: EpisodeHistory | None = None,
        platelet_count: float | None = None,
    ) -> PredictionRequest:
        """Build the request body from a snapshot and the episode history."""
        history = history or EpisodeHistory()
        return cls(
            temperature=snapshot.temperature_f,
            fever_days=snapshot.day_of_illness,
            headache=_flag(snapshot.headache),
            body_pain=_flag(snapshot.body_pain),
            eye_pain=_flag(snapshot.eye_pain),
            nausea_vomiting=_flag(snapshot.nausea or snapshot.vomiting),
            abdominal_pain=_flag(snapshot.abdominal_pain),
            rash=_flag(snapshot.rash),
            bleeding=_flag(snapshot.bleeding),
            platelet_count=(
                platelet_count if platelet_count is not None else DEFAULT_PLATELET_COUNT
            ),
            mosquito_exposure=_flag(history.mosquito_exposure),
            travel=_flag(history.recent_travel),
        )


class Alternative(BaseModel):
    """One entry of the classifier's ranked differential."""

    disease: str
    probability: float


class PredictionResult(BaseModel):
    """Classifier output as consumed by the engine."""

    disease_label: DiseaseLabel
    confidence: float = Field(ge=0, le=100)
    # Sorted descending by probability, at most MAX_ALTERNATIVES entries
    top_alternatives: List[Alternative] = Field(default_factory=list, max_length=MAX_ALTERNATIVES)
    urgency: Optional[Urgency] = None

    # Guideline extras returned by the service alongside the label
    recommendation: Optional[str] = None
    investigations: List[str] = Field(default_factory=list)
    monitoring_plan: List[str] = Field(default_factory=list)
    red_flags: List[str] = Field(default_factory=list)

    @classmethod
    def from_service(cls, payload: dict[str, Any]) -> PredictionResult:
        """Parse the prediction service's JSON reply.

        Unknown disease names are mapped to ``Other``; alternatives are
        re-sorted by probability and truncated to three entries.
        """
        label = payload.get("prediction")
        try:
            disease = DiseaseLabel(label)
        except ValueError:
            disease = DiseaseLabel.OTHER

        ranked = sorted(
            (Alternative(**alt) for alt in payload.get("top_3_predictions") or []),
            key=lambda alt: alt.probability,
            reverse=True,
        )[:MAX_ALTERNATIVES]

        urgency = payload.get("urgency")
        return cls(
            disease_label=disease,
            confidence=payload["confidence"],
            top_alternatives=ranked,
            urgency=Urgency(urgency.upper()) if urgency else None,
            recommendation=payload.get("fefcon_recommendation"),
            investigations=payload.get("investigations_needed") or [],
            monitoring_plan=payload.get("monitoring_plan") or [],
            red_flags=payload.get("red_flags") or [],
        )

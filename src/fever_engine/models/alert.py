"""AlertEvent — what the engine asks an alert sink to deliver.

Mirrors the clinician alert feed: a message, a severity used for badge
colour and toast priority, and the ids needed to link back to the patient.
The engine only decides *whether* to alert; delivery is the sink's job.
"""

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from fever_engine.models.enums import DangerSign, Urgency


class AlertEvent(BaseModel):
    """One alert-worthy update of an episode."""

    alert_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    episode_id: str
    patient_id: str
    # "danger_sign" when local rules fired, "urgency" when only the
    # predictor's urgency warranted the alert
    alert_type: Literal["danger_sign", "urgency"]
    severity: Literal["critical", "high"]
    message: str
    danger_signs: List[DangerSign] = []
    urgency: Optional[Urgency] = None
    day_of_illness: int
    created_at: datetime

"""Episode history — medical and exposure background captured at episode start.

Collected once when a fever episode is opened.  Only the exposure flags
feed the prediction request; the rest is carried for clinicians.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from fever_engine.models.enums import WaterSource


class EpisodeHistory(BaseModel):
    """Medical and exposure history attached to an episode."""

    model_config = ConfigDict(frozen=True)

    # --- Medical history ---
    prior_antibiotics: bool = False
    antibiotic_name: Optional[str] = None
    has_diabetes: bool = False
    immunocompromised: bool = False
    is_pregnant: bool = False

    # --- Exposure history ---
    recent_travel: bool = False
    travel_location: Optional[str] = None
    mosquito_exposure: bool = False
    sick_contacts: bool = False
    water_source: WaterSource = WaterSource.FILTERED

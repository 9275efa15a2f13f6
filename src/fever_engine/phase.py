"""PhaseAdvisor — disease- and day-specific clinical guidance.

Guidance comes from the loaded :class:`GuidelineStore`.  Only Dengue ships
a phase table; for any other label the advisor returns ``None`` and the
caller reports "no guidance available".  New diseases are added as YAML
tables, not as code.
"""

from __future__ import annotations

import logging

from fever_engine.guidelines import GuidelineStore
from fever_engine.models.enums import DiseaseLabel
from fever_engine.models.status import PhaseGuidance

logger = logging.getLogger(__name__)


class PhaseAdvisor:
    """Looks up phase guidance for a (disease, day of illness) pair.

    Args:
        store: a loaded :class:`GuidelineStore` instance
    """

    def __init__(self, store: GuidelineStore) -> None:
        self._store = store

    def advise(self, disease: DiseaseLabel | str, day: int) -> PhaseGuidance | None:
        label = DiseaseLabel(disease).value
        rule = self._store.phase_for(label, day)
        if rule is None:
            logger.debug("No phase guidance available for %s on day %d", label, day)
            return None
        return PhaseGuidance(disease=label, phase=rule.phase, notes=list(rule.notes))

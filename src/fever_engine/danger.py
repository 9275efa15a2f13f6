"""Danger-sign detection and the urgency floor it imposes.

Danger signs are fixed rules over one snapshot:

  - bleeding                 → BLEEDING
  - breathlessness           → BREATHLESSNESS
  - confusion                → CONFUSION
  - abdominal pain           → SEVERE_ABDOMINAL_PAIN
  - urine output "bloody"    → BLOODY_URINE

Any sign lifts the surfaced urgency to at least HIGH.  The override only
ever raises: an EMERGENCY or CRITICAL urgency from the predictor is kept.
"""

from __future__ import annotations

from fever_engine.constants import DANGER_URGENCY_FLOOR, URGENCY_ORDER
from fever_engine.models.enums import DangerSign, Urgency, UrineOutput
from fever_engine.models.snapshot import SymptomReading

# (flag attribute, sign) pairs for the boolean checklist items
_FLAG_RULES: list[tuple[str, DangerSign]] = [
    ("bleeding", DangerSign.BLEEDING),
    ("breathlessness", DangerSign.BREATHLESSNESS),
    ("confusion", DangerSign.CONFUSION),
    ("abdominal_pain", DangerSign.SEVERE_ABDOMINAL_PAIN),
]


def detect_danger_signs(snapshot: SymptomReading) -> frozenset[DangerSign]:
    """Return the set of danger signs triggered by one snapshot."""
    signs = {sign for attr, sign in _FLAG_RULES if getattr(snapshot, attr)}
    if snapshot.urine_output == UrineOutput.BLOODY:
        signs.add(DangerSign.BLOODY_URINE)
    return frozenset(signs)


def ordered_signs(signs: frozenset[DangerSign]) -> list[DangerSign]:
    """Return signs in their declaration order, for stable reporting."""
    return [sign for sign in DangerSign if sign in signs]


def urgency_rank(urgency: Urgency | str) -> int:
    return URGENCY_ORDER.index(Urgency(urgency).value)


def escalate_urgency(
    external: Urgency | None, signs: frozenset[DangerSign]
) -> Urgency | None:
    """Combine the predictor's urgency with the local danger-sign floor.

    Without danger signs the external urgency is returned unchanged (which
    may be None).  With danger signs the result is the higher of the
    external urgency and HIGH.
    """
    if not signs:
        return external
    floor = Urgency(DANGER_URGENCY_FLOOR)
    if external is None or urgency_rank(external) < urgency_rank(floor):
        return floor
    return external

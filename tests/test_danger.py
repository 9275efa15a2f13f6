"""Danger-sign detection and urgency escalation tests.

Each sign is driven by one field of the snapshot.  Any sign lifts the
surfaced urgency to at least HIGH; EMERGENCY/CRITICAL from the predictor
is never lowered.
"""

import pytest

from fever_engine.danger import detect_danger_signs, escalate_urgency, ordered_signs
from fever_engine.models.enums import DangerSign, Urgency
from fever_engine.models.snapshot import SymptomReading


def _reading(**kwargs) -> SymptomReading:
    return SymptomReading(temperature_f=101.0, **kwargs)


# =====================================================================
# Detection
# =====================================================================


class TestDetectDangerSigns:
    """One rule per sign, evaluated on a single snapshot."""

    def test_no_triggers_yields_empty_set(self):
        """Ordinary fever symptoms are not danger signs."""
        reading = _reading(headache=True, body_pain=True, rash=True, nausea=True)
        assert detect_danger_signs(reading) == frozenset()

    def test_bleeding_only(self):
        assert detect_danger_signs(_reading(bleeding=True)) == {DangerSign.BLEEDING}

    @pytest.mark.parametrize(
        ("field", "sign"),
        [
            ("breathlessness", DangerSign.BREATHLESSNESS),
            ("confusion", DangerSign.CONFUSION),
            ("abdominal_pain", DangerSign.SEVERE_ABDOMINAL_PAIN),
        ],
    )
    def test_single_flag_maps_to_sign(self, field, sign):
        assert detect_danger_signs(_reading(**{field: True})) == {sign}

    def test_bloody_urine(self):
        """Only the 'bloody' urine category is a danger sign."""
        assert detect_danger_signs(_reading(urine_output="bloody")) == {
            DangerSign.BLOODY_URINE
        }
        assert detect_danger_signs(_reading(urine_output="dark")) == frozenset()

    def test_multiple_signs_reported_in_declaration_order(self):
        reading = _reading(
            urine_output="bloody", confusion=True, bleeding=True,
        )
        signs = detect_danger_signs(reading)
        assert ordered_signs(signs) == [
            DangerSign.BLEEDING,
            DangerSign.CONFUSION,
            DangerSign.BLOODY_URINE,
        ]


# =====================================================================
# Urgency override
# =====================================================================


class TestEscalateUrgency:
    """The danger-sign floor only ever raises urgency."""

    @pytest.mark.parametrize("external", [None, Urgency.LOW, Urgency.MEDIUM])
    def test_signs_raise_low_urgency_to_high(self, external):
        signs = frozenset({DangerSign.BLEEDING})
        assert escalate_urgency(external, signs) == Urgency.HIGH

    @pytest.mark.parametrize(
        "external", [Urgency.HIGH, Urgency.EMERGENCY, Urgency.CRITICAL],
    )
    def test_signs_keep_higher_urgency(self, external):
        """EMERGENCY from the predictor is not lowered to HIGH."""
        signs = frozenset({DangerSign.CONFUSION})
        assert escalate_urgency(external, signs) == external

    @pytest.mark.parametrize("external", [None, Urgency.LOW, Urgency.CRITICAL])
    def test_no_signs_pass_external_through(self, external):
        assert escalate_urgency(external, frozenset()) == external

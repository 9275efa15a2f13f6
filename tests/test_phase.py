"""GuidelineStore loading and PhaseAdvisor lookup tests.

The shipped tables cover Dengue only:
    days 1-3 febrile, days 4-7 critical, day 8+ recovery.
"""

import pytest

from fever_engine.guidelines import GuidelineStore
from fever_engine.models.enums import DiseaseLabel
from fever_engine.models.guideline import DiseaseGuideline


# =====================================================================
# Store loading
# =====================================================================


class TestGuidelineStore:
    """Loading and validation of the YAML tables."""

    def test_shipped_tables_load(self, guideline_store):
        assert guideline_store.has_guideline("Dengue")
        assert not guideline_store.has_guideline("Malaria")

    def test_dengue_phases_ordered_and_contiguous(self, guideline_store):
        phases = guideline_store.guidelines["Dengue"].phases
        assert [p.phase for p in phases] == [
            "Febrile phase", "Critical phase", "Recovery phase",
        ]
        assert phases[-1].max_day is None, "Recovery phase should be open-ended"

    def test_missing_directory_raises(self, tmp_path):
        store = GuidelineStore(guideline_dir=tmp_path / "nope")
        with pytest.raises(FileNotFoundError):
            store.load()

    def test_custom_directory(self, tmp_path):
        (tmp_path / "malaria.yaml").write_text(
            "disease: Malaria\n"
            "phases:\n"
            "  - phase: Acute\n"
            "    min_day: 1\n"
            "    notes: [Start antimalarials]\n",
            encoding="utf-8",
        )
        store = GuidelineStore(guideline_dir=tmp_path)
        store.load()
        assert store.phase_for("Malaria", 12).phase == "Acute"

    def test_duplicate_disease_rejected(self, tmp_path):
        body = "disease: Dengue\nphases:\n  - phase: All\n    notes: [x]\n"
        (tmp_path / "a.yaml").write_text(body, encoding="utf-8")
        (tmp_path / "b.yaml").write_text(body, encoding="utf-8")
        with pytest.raises(ValueError, match="Duplicate"):
            GuidelineStore(guideline_dir=tmp_path).load()

    def test_overlapping_phases_rejected(self):
        with pytest.raises(ValueError, match="overlaps"):
            DiseaseGuideline(
                disease="Dengue",
                phases=[
                    {"phase": "A", "min_day": 1, "max_day": 4, "notes": []},
                    {"phase": "B", "min_day": 4, "max_day": 7, "notes": []},
                ],
            )

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError, match="max_day < min_day"):
            DiseaseGuideline(
                disease="Dengue",
                phases=[{"phase": "A", "min_day": 5, "max_day": 2, "notes": []}],
            )


# =====================================================================
# Advisor lookup
# =====================================================================


class TestPhaseAdvisor:
    """Guidance by (disease, day of illness)."""

    @pytest.mark.parametrize(
        ("day", "phase"),
        [(1, "Febrile phase"), (3, "Febrile phase"), (4, "Critical phase"),
         (7, "Critical phase"), (8, "Recovery phase"), (30, "Recovery phase")],
    )
    def test_dengue_phase_boundaries(self, advisor, day, phase):
        assert advisor.advise(DiseaseLabel.DENGUE, day).phase == phase

    def test_dengue_day_five_mentions_platelet_admission(self, advisor):
        """Critical phase guidance includes the platelet admission threshold."""
        guidance = advisor.advise("Dengue", 5)
        assert guidance.disease == "Dengue"
        assert guidance.phase == "Critical phase"
        assert any("platelet <100k" in note.lower() for note in guidance.notes)

    def test_dengue_day_ten_is_recovery(self, advisor):
        guidance = advisor.advise(DiseaseLabel.DENGUE, 10)
        assert guidance.phase == "Recovery phase"
        assert any("fluid overload" in note.lower() for note in guidance.notes)

    @pytest.mark.parametrize(
        "disease", [DiseaseLabel.MALARIA, DiseaseLabel.TYPHOID, DiseaseLabel.OTHER],
    )
    def test_no_table_means_no_guidance(self, advisor, disease):
        assert advisor.advise(disease, 3) is None

    def test_unknown_label_rejected(self, advisor):
        with pytest.raises(ValueError):
            advisor.advise("Chikungunya", 3)

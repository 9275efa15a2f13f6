"""GuidelineStore — loads disease-phase tables from YAML into typed models.

The store is loaded once at startup and provides lookup by disease label.
Each ``*.yaml`` file under the guideline directory describes one disease
(see :mod:`fever_engine.models.guideline` for the shape).

Usage::

    store = GuidelineStore()        # defaults to the tables shipped in fever_engine/data/
    store.load()

    rule = store.phase_for("Dengue", 5)   # -> PhaseRule("Critical phase", ...)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fever_engine.models.guideline import DiseaseGuideline, PhaseRule

logger = logging.getLogger(__name__)

# Tables shipped with the package
DEFAULT_GUIDELINE_DIR = Path(__file__).resolve().parent / "data"


def load_yaml(path: Path | str) -> Any:
    """Load a single YAML file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing YAML file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class GuidelineStore:
    """Loads every guideline YAML in a directory and indexes it by disease.

    Attributes populated after :meth:`load`:

        guidelines — dict[disease_label, DiseaseGuideline]
    """

    def __init__(self, guideline_dir: str | Path | None = None) -> None:
        self._base = Path(guideline_dir) if guideline_dir is not None else DEFAULT_GUIDELINE_DIR
        self.guidelines: dict[str, DiseaseGuideline] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Parse all ``*.yaml`` files in the guideline directory.

        Raises ``FileNotFoundError`` if the directory does not exist and
        ``ValueError`` if two files describe the same disease.
        """
        if not self._base.is_dir():
            raise FileNotFoundError(f"Missing guideline directory: {self._base}")

        for path in sorted(self._base.glob("*.yaml")):
            guideline = DiseaseGuideline(**load_yaml(path))
            if guideline.disease in self.guidelines:
                raise ValueError(
                    f"Duplicate guideline for disease '{guideline.disease}' in {path.name}"
                )
            self.guidelines[guideline.disease] = guideline

        logger.info(
            "GuidelineStore loaded: %d diseases (%s)",
            len(self.guidelines),
            ", ".join(sorted(self.guidelines)) or "none",
        )

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------

    def has_guideline(self, disease: str) -> bool:
        return disease in self.guidelines

    def phase_for(self, disease: str, day: int) -> PhaseRule | None:
        """Return the phase covering ``day`` for ``disease``, or None.

        None means either no table exists for the disease or no phase of
        its table covers the day.
        """
        guideline = self.guidelines.get(disease)
        if guideline is None:
            return None
        for rule in guideline.phases:
            if rule.covers(day):
                return rule
        return None

from datetime import datetime, timezone

import pytest

from fever_engine.episode import Episode
from fever_engine.guidelines import GuidelineStore
from fever_engine.orchestrator import RiskEscalationOrchestrator
from fever_engine.phase import PhaseAdvisor

# Fixed episode start used across the suite; readings are offset from it.
EPISODE_START = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def guideline_store():
    """Load the guideline tables shipped with the package once per session."""
    s = GuidelineStore()
    s.load()
    return s


@pytest.fixture
def advisor(guideline_store):
    return PhaseAdvisor(guideline_store)


@pytest.fixture
def orchestrator(advisor):
    return RiskEscalationOrchestrator(advisor)


@pytest.fixture
def episode():
    """A fresh active episode started at EPISODE_START."""
    return Episode("patient-1", started_at=EPISODE_START, episode_id="ep-1")

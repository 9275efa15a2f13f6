#!/usr/bin/env python3
"""Simulate a dengue-like fever episode through the EpisodeTracker.

Replays a scripted nine-day course (fever, critical phase with warning
signs, recovery) with a canned prediction service and an in-memory alert
sink, then prints a table of every composed status, the daily trend and
the alerts that were published.

By default temperatures are jittered (``--random``, on by default) so each
run differs slightly.  Use ``--no-random`` for the exact scripted values.

Usage::

    # Install deps (first time only)
    uv pip install rich

    # Default run
    python scripts/simulate_episode.py

    # Deterministic run, seeded jitter, no prediction service
    python scripts/simulate_episode.py --no-random
    python scripts/simulate_episode.py --seed 7
    python scripts/simulate_episode.py --no-predictor
"""

from __future__ import annotations

import argparse
import asyncio
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

from rich.console import Console
from rich.table import Table

# ---------------------------------------------------------------------------
# Ensure src/ is importable when run from a checkout
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from fever_engine.guidelines import GuidelineStore  # noqa: E402
from fever_engine.interfaces import PredictionService  # noqa: E402
from fever_engine.models.enums import Urgency  # noqa: E402
from fever_engine.models.history import EpisodeHistory  # noqa: E402
from fever_engine.models.prediction import PredictionRequest, PredictionResult  # noqa: E402
from fever_engine.models.snapshot import SymptomReading  # noqa: E402
from fever_engine.orchestrator import RiskEscalationOrchestrator  # noqa: E402
from fever_engine.phase import PhaseAdvisor  # noqa: E402
from fever_engine.tracker import EpisodeTracker  # noqa: E402
from fever_server.alerts import MemoryAlertSink  # noqa: E402

# ---------------------------------------------------------------------------
# Scripted course: (day, slot, temperature °F, extra symptom flags)
# ---------------------------------------------------------------------------

SCRIPT: list[tuple[int, str, float, dict]] = [
    (1, "morning", 101.8, {"headache": True, "body_pain": True}),
    (1, "evening", 103.1, {"headache": True, "body_pain": True, "eye_pain": True}),
    (2, "morning", 102.6, {"headache": True, "body_pain": True}),
    (2, "night", 103.4, {"body_pain": True, "nausea": True}),
    (3, "afternoon", 102.2, {"rash": True, "rash_location": "trunk"}),
    (4, "morning", 100.9, {"vomiting": True, "vomiting_count": 2, "food_intake": "poor"}),
    (5, "morning", 99.8, {"abdominal_pain": True, "urine_output": "reduced"}),
    (5, "evening", 99.4, {"bleeding": True, "bleeding_site": "gums"}),
    (6, "morning", 99.0, {"food_intake": "reduced"}),
    (7, "afternoon", 98.8, {}),
    (8, "morning", 98.4, {}),
    (9, "morning", 98.2, {}),
]

# Slot → hour of day used to timestamp the readings
SLOT_HOURS = {"morning": 8, "afternoon": 14, "evening": 19, "night": 23}

EPISODE_START = datetime(2026, 3, 1, 7, 0, tzinfo=timezone.utc)


class CannedPredictionService(PredictionService):
    """Always predicts Dengue; urgency rises with the fever-day count."""

    async def predict(self, request: PredictionRequest) -> PredictionResult:
        if request.fever_days >= 4:
            urgency = Urgency.HIGH if request.bleeding else Urgency.MEDIUM
        else:
            urgency = Urgency.LOW
        return PredictionResult(
            disease_label="Dengue",
            confidence=72.0 + min(request.fever_days, 5) * 3,
            top_alternatives=[
                {"disease": "Dengue", "probability": 72.0},
                {"disease": "Viral", "probability": 18.0},
                {"disease": "Typhoid", "probability": 6.0},
            ],
            urgency=urgency,
        )


def _readings(jitter: bool, rng: random.Random):
    for day, slot, temp, flags in SCRIPT:
        if jitter:
            temp = round(temp + rng.uniform(-0.4, 0.4), 1)
        recorded_at = EPISODE_START + timedelta(days=day - 1)
        recorded_at = recorded_at.replace(hour=SLOT_HOURS[slot])
        yield recorded_at, SymptomReading(temperature_f=temp, time_of_day=slot, **flags)


async def run_simulation(args: argparse.Namespace) -> None:
    console = Console()
    rng = random.Random(args.seed)

    store = GuidelineStore()
    store.load()
    sink = MemoryAlertSink()
    tracker = EpisodeTracker(
        RiskEscalationOrchestrator(PhaseAdvisor(store)),
        predictor=None if args.no_predictor else CannedPredictionService(),
        alert_sink=sink,
    )
    episode = tracker.start_episode(
        "sim_patient",
        started_at=EPISODE_START,
        history=EpisodeHistory(mosquito_exposure=True, water_source="tap"),
    )

    table = Table(title=f"Episode {episode.episode_id}", show_lines=True)
    for column in ("Day", "Slot", "Temp °F", "Band", "Danger signs", "Phase", "Urgency", "Alert"):
        table.add_column(column)

    for recorded_at, reading in _readings(args.random, rng):
        status = await tracker.log_reading(episode, reading, now=recorded_at)
        table.add_row(
            str(status.current_day),
            reading.time_of_day.value,
            f"{status.temperature_f:.1f}",
            status.severity_band.value,
            ", ".join(s.value for s in status.danger_signs) or "-",
            status.phase_guidance.phase if status.phase_guidance else "-",
            status.effective_urgency.value if status.effective_urgency else "-",
            "[red]yes[/]" if status.alert_recommended else "no",
        )

    tracker.resolve_episode(episode, now=recorded_at + timedelta(hours=4))
    console.print(table)

    trend = Table(title="Daily trend")
    trend.add_column("Day")
    trend.add_column("Mean °F")
    trend.add_column("Readings")
    for point in episode.log.daily_trend():
        trend.add_row(str(point.day), f"{point.mean_temperature_f:.2f}", str(point.readings))
    console.print(trend)

    console.print(f"\n[bold]Alerts published:[/] {len(sink.events)}")
    for event in sink.events:
        colour = "red" if event.severity == "critical" else "yellow"
        console.print(f"  [{colour}]{event.severity.upper()}[/] {event.message}")
    console.print(f"\nFinal state: {episode!r}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Simulate a dengue-like fever episode through the EpisodeTracker.",
    )
    parser.add_argument(
        "--random",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Jitter temperatures by up to ±0.4 °F (default: on).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible jitter",
    )
    parser.add_argument(
        "--no-predictor",
        action="store_true",
        help="Run without a prediction service (no phase guidance)",
    )
    args = parser.parse_args()
    asyncio.run(run_simulation(args))


if __name__ == "__main__":
    main()

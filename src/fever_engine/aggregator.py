"""EpisodeLog — the append-only snapshot log of one episode.

Snapshots are kept in insertion order, which callers keep chronological.
Two readings in the same day and time slot are both retained.  All views
(trend, day detail, latest) are recomputed from the log on every call and
never mutate it.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterator

from fever_engine.constants import TIME_SLOT_ORDER
from fever_engine.models.snapshot import SymptomSnapshot
from fever_engine.models.status import TrendPoint

# Untagged readings sort after every tagged slot of the same day.
_UNTAGGED_SLOT = len(TIME_SLOT_ORDER) + 1


def _slot_rank(snapshot: SymptomSnapshot) -> int:
    if snapshot.time_of_day is None:
        return _UNTAGGED_SLOT
    return TIME_SLOT_ORDER[snapshot.time_of_day.value]


class EpisodeLog:
    """Ordered, append-only sequence of :class:`SymptomSnapshot`."""

    def __init__(self, snapshots: list[SymptomSnapshot] | None = None) -> None:
        self._snapshots: list[SymptomSnapshot] = list(snapshots or [])

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[SymptomSnapshot]:
        return iter(self._snapshots)

    def append(self, snapshot: SymptomSnapshot) -> None:
        """Add a snapshot to the end of the log.  Never rejects."""
        self._snapshots.append(snapshot)

    def days(self) -> list[int]:
        """Distinct days of illness with at least one reading, ascending."""
        return sorted({s.day_of_illness for s in self._snapshots})

    def daily_trend(self) -> list[TrendPoint]:
        """One point per day of illness with the mean of that day's temperatures."""
        by_day: dict[int, list[float]] = defaultdict(list)
        for snapshot in self._snapshots:
            by_day[snapshot.day_of_illness].append(snapshot.temperature_f)

        return [
            TrendPoint(
                day=day,
                mean_temperature_f=round(sum(temps) / len(temps), 2),
                readings=len(temps),
            )
            for day, temps in sorted(by_day.items())
        ]

    def day_detail(self, day: int) -> list[SymptomSnapshot]:
        """All snapshots of ``day``, ordered morning → night.

        Readings without a time-of-day tag follow the tagged ones.  Ties
        are broken by ``recorded_at`` and then by insertion order.  A day
        without readings yields an empty list.
        """
        matching = [s for s in self._snapshots if s.day_of_illness == day]
        return sorted(matching, key=lambda s: (_slot_rank(s), s.recorded_at))

    def latest(self) -> SymptomSnapshot | None:
        """Most recent snapshot by ``recorded_at``; last appended wins ties."""
        if not self._snapshots:
            return None
        return max(reversed(self._snapshots), key=lambda s: s.recorded_at)

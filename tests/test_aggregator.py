"""EpisodeLog tests — trend, day detail and latest views.

Views are recomputed from the log on every call; they never mutate it.
"""

from datetime import datetime, timedelta, timezone

import pytest

from fever_engine.aggregator import EpisodeLog
from fever_engine.models.snapshot import SymptomReading, SymptomSnapshot

T0 = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)


def _snap(day: int, temp: float, slot: str | None = None, *, hours: float = 0, sid=None):
    reading = SymptomReading(temperature_f=temp, time_of_day=slot)
    return SymptomSnapshot.from_reading(
        reading,
        day_of_illness=day,
        recorded_at=T0 + timedelta(hours=hours),
        snapshot_id=sid,
    )


@pytest.fixture
def log():
    """Three days of readings, appended out of slot order within day 2."""
    lg = EpisodeLog()
    lg.append(_snap(1, 100.0, "morning", hours=1, sid="d1-m"))
    lg.append(_snap(1, 102.0, "evening", hours=10, sid="d1-e"))
    lg.append(_snap(2, 103.0, "night", hours=38, sid="d2-n"))
    lg.append(_snap(2, 101.0, "morning", hours=25, sid="d2-m"))
    lg.append(_snap(2, 102.5, None, hours=30, sid="d2-untagged"))
    lg.append(_snap(4, 99.0, "afternoon", hours=80, sid="d4-a"))
    return lg


# =====================================================================
# Trend
# =====================================================================


class TestDailyTrend:
    """One point per day, mean temperature, ascending by day."""

    def test_means_per_day(self, log):
        trend = log.daily_trend()
        assert [p.day for p in trend] == [1, 2, 4], "Days without readings are skipped"
        assert trend[0].mean_temperature_f == 101.0
        assert trend[1].mean_temperature_f == 102.17
        assert trend[1].readings == 3
        assert trend[2].mean_temperature_f == 99.0

    def test_idempotent(self, log):
        """Repeated calls give identical results and leave the log untouched."""
        first = log.daily_trend()
        second = log.daily_trend()
        assert first == second
        assert len(log) == 6

    def test_empty_log(self):
        assert EpisodeLog().daily_trend() == []


# =====================================================================
# Day detail
# =====================================================================


class TestDayDetail:
    """Snapshots of one day, morning → night, untagged last."""

    def test_slot_order(self, log):
        ids = [s.snapshot_id for s in log.day_detail(2)]
        assert ids == ["d2-m", "d2-n", "d2-untagged"]

    def test_round_trip(self, log):
        """Every appended snapshot is returned by exactly one day query."""
        seen = [s.snapshot_id for day in log.days() for s in log.day_detail(day)]
        assert sorted(seen) == sorted(s.snapshot_id for s in log)

    def test_same_slot_readings_both_retained(self):
        lg = EpisodeLog()
        lg.append(_snap(1, 100.0, "morning", hours=2, sid="late"))
        lg.append(_snap(1, 101.0, "morning", hours=1, sid="early"))
        assert [s.snapshot_id for s in lg.day_detail(1)] == ["early", "late"]

    def test_day_without_readings_is_empty(self, log):
        assert log.day_detail(3) == []
        assert log.day_detail(99) == []

    def test_days(self, log):
        assert log.days() == [1, 2, 4]


# =====================================================================
# Latest
# =====================================================================


class TestLatest:
    """Most recent by recorded_at."""

    def test_latest_by_recorded_at(self, log):
        assert log.latest().snapshot_id == "d4-a"

    def test_latest_ignores_append_order(self):
        lg = EpisodeLog()
        lg.append(_snap(2, 101.0, hours=30, sid="newer"))
        lg.append(_snap(1, 100.0, hours=5, sid="older"))
        assert lg.latest().snapshot_id == "newer"

    def test_tie_goes_to_last_appended(self):
        lg = EpisodeLog()
        lg.append(_snap(1, 100.0, hours=1, sid="first"))
        lg.append(_snap(1, 101.0, hours=1, sid="second"))
        assert lg.latest().snapshot_id == "second"

    def test_empty_log_has_no_latest(self):
        assert EpisodeLog().latest() is None

"""Illness-day counter tests."""

from datetime import datetime, timedelta, timezone

import pytest

from fever_engine.illness_day import day_of_illness, resolve_day

START = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)


class TestDayOfIllness:
    """``floor(elapsed / 24h) + 1``, never below 1."""

    @pytest.mark.parametrize(
        ("elapsed", "day"),
        [
            (timedelta(0), 1),
            (timedelta(hours=23, minutes=59), 1),
            (timedelta(hours=24), 2),
            (timedelta(hours=25), 2),
            (timedelta(days=4, hours=1), 5),
        ],
    )
    def test_examples(self, elapsed, day):
        assert day_of_illness(START, START + elapsed) == day

    def test_now_before_start_clamps_to_day_one(self):
        """Clock skew never produces day 0 or negative days."""
        assert day_of_illness(START, START - timedelta(hours=5)) == 1

    def test_naive_datetimes_treated_as_utc(self):
        naive_start = datetime(2026, 3, 1, 8, 0)
        aware_now = datetime(2026, 3, 3, 9, 0, tzinfo=timezone.utc)
        assert day_of_illness(naive_start, aware_now) == 3

    def test_other_timezones_compared_in_absolute_time(self):
        ict = timezone(timedelta(hours=7))
        # 15:00 ICT on Mar 2 is 08:00 UTC, exactly 24h after start
        assert day_of_illness(START, datetime(2026, 3, 2, 15, 0, tzinfo=ict)) == 2


class TestResolveDay:
    """Daily-log readings carry an explicit day; quick logs derive it."""

    def test_explicit_day_wins(self):
        assert resolve_day(START, START, explicit=4) == 4

    def test_derived_when_absent(self):
        assert resolve_day(START, START + timedelta(days=2)) == 3


class TestDayBoundary:
    """Crossing a 24-hour boundary by one second starts the next day."""

    def test_one_second_past_third_boundary(self):
        start = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        now = datetime(2024, 1, 4, 0, 0, 1, tzinfo=timezone.utc)
        assert day_of_illness(start, now) == 4

    def test_one_second_before_boundary(self):
        start = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        now = datetime(2024, 1, 3, 23, 59, 59, tzinfo=timezone.utc)
        assert day_of_illness(start, now) == 3

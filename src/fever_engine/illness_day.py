"""Illness-day calculation.

Day 1 is the calendar span of the first 24 hours after the episode started;
every further full 24 hours adds one.  Naive datetimes are taken as UTC.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_ONE_DAY = timedelta(days=1)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def day_of_illness(started_at: datetime, now: datetime) -> int:
    """Return ``floor((now - started_at) / 1 day) + 1``, never less than 1."""
    elapsed = _as_utc(now) - _as_utc(started_at)
    return max(1, elapsed // _ONE_DAY + 1)


def resolve_day(started_at: datetime, now: datetime, explicit: int | None = None) -> int:
    """Pick the day of illness for a reading.

    A caller-supplied day (daily-log flow) is returned unchanged; otherwise
    the day is computed from the episode start (quick-log flow).
    """
    if explicit is not None:
        return explicit
    return day_of_illness(started_at, now)

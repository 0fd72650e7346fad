"""Puzzle release calendar: which years and days can be downloaded."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from aocinput.errors import InvalidYearError, NotReleasedError

FIRST_YEAR = 2015
SHORT_EVENT_FROM = 2025  # events from 2025 on run 12 days


def validate_year(year: int, *, now: datetime) -> None:
    """Raise :class:`InvalidYearError` unless puzzles exist for `year`."""
    if not FIRST_YEAR <= year <= now.year:
        raise InvalidYearError(year, now.year)


def max_day_for(year: int) -> int:
    return 12 if year >= SHORT_EVENT_FROM else 25


def day_in_range(year: int, day: int) -> bool:
    return 1 <= day <= max_day_for(year)


def release_time(year: int, day: int, *, timezone: str = "America/New_York", hour: int = 0) -> datetime:
    """Return the aware datetime at which `day` of `year` unlocks."""
    return datetime(year, 12, day, hour, tzinfo=ZoneInfo(timezone))


def ensure_released(
    year: int,
    day: int,
    *,
    now: datetime,
    timezone: str = "America/New_York",
    hour: int = 0,
) -> None:
    """Raise :class:`NotReleasedError` if `day` is still locked at `now`."""
    release = release_time(year, day, timezone=timezone, hour=hour)
    if now < release:
        raise NotReleasedError(release, day=day, year=year)


__all__ = [
    "FIRST_YEAR",
    "day_in_range",
    "ensure_released",
    "max_day_for",
    "release_time",
    "validate_year",
]

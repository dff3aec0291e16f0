"""Weekday enumeration and weekday/weekend classification."""

from __future__ import annotations

from enum import StrEnum


class Day(StrEnum):
    """The seven days of the week, Monday first."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class DayType(StrEnum):
    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"


WEEKEND_DAYS: frozenset[Day] = frozenset({Day.SATURDAY, Day.SUNDAY})


def get_day_type(day: Day) -> DayType:
    if day in WEEKEND_DAYS:
        return DayType.WEEKEND
    return DayType.WEEKDAY


def parse_day(name: str) -> Day:
    """Look up a day by name, ignoring case and surrounding whitespace.

    Raises:
        ValueError: If *name* is not a weekday name.
    """
    try:
        return Day(name.strip().lower())
    except ValueError:
        msg = f"Unknown day: {name!r}"
        raise ValueError(msg) from None

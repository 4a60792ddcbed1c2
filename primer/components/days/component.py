from __future__ import annotations

from .models import Day, DayType

WEEKEND_DAYS: frozenset[Day] = frozenset({Day.SATURDAY, Day.SUNDAY})


def get_day_type(day: Day) -> DayType:
    """Return "Weekend" for Saturday/Sunday, otherwise "Weekday"."""
    if day in WEEKEND_DAYS:
        return "Weekend"
    return "Weekday"


def parse_day(name: str) -> Day:
    """
    Parse a day name, case-insensitively.

    Raises:
        ValueError: If name is not a day of the week
    """
    try:
        return Day[name.strip().upper()]
    except KeyError:
        valid = ", ".join(d.name.title() for d in Day)
        raise ValueError(f"Unknown day {name!r}; expected one of: {valid}") from None

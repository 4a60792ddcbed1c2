"""
Days component models.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal


class Day(Enum):
    """Days of the week in fixed order, Monday first."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


DayType = Literal["Weekday", "Weekend"]

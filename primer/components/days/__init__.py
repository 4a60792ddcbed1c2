"""
Days component - Weekday/weekend classification.
"""

from .component import WEEKEND_DAYS, get_day_type, parse_day
from .models import Day, DayType

__all__ = [
    "Day",
    "DayType",
    "WEEKEND_DAYS",
    "get_day_type",
    "parse_day",
]

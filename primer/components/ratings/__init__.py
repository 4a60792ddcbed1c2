"""
Ratings component - Filtering rated items by a minimum rating.
"""

from .component import DEFAULT_MIN_RATING, filter_by_rating, run, run_filter
from .models import FilterByRatingInput, FilterByRatingOutput, RatedItem
from .ports import RatingsRulesPort

__all__ = [
    # Entry points
    "run",
    "run_filter",
    # Pure functions
    "filter_by_rating",
    "DEFAULT_MIN_RATING",
    # Models
    "FilterByRatingInput",
    "FilterByRatingOutput",
    "RatedItem",
    # Ports
    "RatingsRulesPort",
]

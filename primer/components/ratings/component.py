"""
Ratings component - Filtering rated items by a minimum rating.

Invariants:
- Output is a subsequence of input (relative order preserved)
- Every kept item has rating >= threshold; no qualifying item is dropped
- Input is never mutated
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import FilterByRatingInput, FilterByRatingOutput, RatedItem
from .ports import RatingsRulesPort

DEFAULT_MIN_RATING = 4


def filter_by_rating(
    items: Iterable[RatedItem],
    min_rating: float = DEFAULT_MIN_RATING,
) -> tuple[RatedItem, ...]:
    """Return the items whose rating is at least min_rating, in order."""
    return tuple(item for item in items if item.rating >= min_rating)


def run_filter(
    inp: FilterByRatingInput,
    *,
    rules: RatingsRulesPort | None = None,
) -> FilterByRatingOutput:
    """
    Filter rated items.

    Args:
        inp: Input containing the items
        rules: Optional rules port for the threshold

    Returns:
        FilterByRatingOutput with kept items and how many were dropped
    """
    min_rating = rules.get_min_rating() if rules is not None else DEFAULT_MIN_RATING

    kept = filter_by_rating(inp.items, min_rating)
    return FilterByRatingOutput(items=kept, dropped_count=len(inp.items) - len(kept))


def run(
    inp: FilterByRatingInput,
    *,
    rules: RatingsRulesPort | None = None,
) -> FilterByRatingOutput:
    """Main entry point for the ratings component."""
    return run_filter(inp, rules=rules)

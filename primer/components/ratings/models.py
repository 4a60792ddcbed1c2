"""
Ratings component models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class RatedItem:
    """A titled item with a numeric rating (range unconstrained)."""

    title: str
    rating: float


@dataclass(frozen=True)
class FilterByRatingInput:
    """Input for filtering items by rating."""

    items: Sequence[RatedItem]


@dataclass(frozen=True)
class FilterByRatingOutput:
    """Output for filter operation."""

    items: tuple[RatedItem, ...]
    dropped_count: int
    success: bool = True

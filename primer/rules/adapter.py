"""
Rules adapter.

Exposes loaded Rules through the getter-style ports the components accept.
"""

from __future__ import annotations

from primer.rules.models import Rules


class RulesAdapter:
    """Adapts a Rules model to the component rules ports."""

    def __init__(self, rules: Rules | None = None) -> None:
        self._rules = rules or Rules()

    def get_default_upper(self) -> bool:
        return self._rules.text_case.default_upper

    def get_min_rating(self) -> float:
        return self._rules.ratings.min_rating

    def get_delay_seconds(self) -> float:
        return self._rules.square.delay_seconds

"""
Square component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class SleeperPort(Protocol):
    """Suspends the caller; enables deterministic testing of the delay."""

    async def sleep(self, seconds: float) -> None:
        """Resume after the given number of seconds."""
        ...


class SquareRulesPort(Protocol):
    """Port for square rules configuration."""

    def get_delay_seconds(self) -> float:
        """Get the fixed delay before the result is delivered."""
        ...

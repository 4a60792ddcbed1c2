"""
Square component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class NegativeNumberError(ValueError):
    """Raised when squaring is requested for a negative number."""


@dataclass(frozen=True)
class SquareValidationError:
    """Square validation error."""

    code: str
    message: str


@dataclass(frozen=True)
class SquareInput:
    """Input for the delayed square computation."""

    n: float


@dataclass(frozen=True)
class SquareOutput:
    """Output for square operation."""

    value: float | None
    errors: list[SquareValidationError] = field(default_factory=list)
    success: bool = True

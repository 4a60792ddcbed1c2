"""
Normalizer component models.

NormalizerValue is a closed union; adding a variant must be matched in
process_value or mypy reports the assert_never branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class TextValue:
    text: str


@dataclass(frozen=True)
class NumberValue:
    number: float


NormalizerValue: TypeAlias = TextValue | NumberValue


@dataclass(frozen=True)
class NormalizeInput:
    """Input for normalizing a value."""

    value: NormalizerValue


@dataclass(frozen=True)
class NormalizeOutput:
    """Output for normalize operation."""

    result: float
    success: bool = True

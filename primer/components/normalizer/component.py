"""
Normalizer component - Maps text or numbers onto a single number.

- TextValue -> character count
- NumberValue -> value doubled
"""

from __future__ import annotations

from typing import assert_never

from .models import (
    NormalizeInput,
    NormalizeOutput,
    NormalizerValue,
    NumberValue,
    TextValue,
)


def process_value(value: NormalizerValue) -> float:
    """
    Normalize a tagged value.

    Args:
        value: TextValue or NumberValue

    Returns:
        len(text) for text, number * 2 for numbers
    """
    match value:
        case TextValue(text=text):
            return len(text)
        case NumberValue(number=number):
            return number * 2
        case _:
            assert_never(value)


def to_normalizer_value(raw: str | int | float) -> NormalizerValue:
    """
    Tag a raw Python value.

    Raises:
        TypeError: If raw is neither text nor a number (bool is rejected)
    """
    if isinstance(raw, str):
        return TextValue(raw)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NumberValue(raw)
    raise TypeError(f"Expected str, int or float, got {type(raw).__name__}")


def run_normalize(inp: NormalizeInput) -> NormalizeOutput:
    """Normalize the tagged value carried by inp."""
    return NormalizeOutput(result=process_value(inp.value))


def run(inp: NormalizeInput) -> NormalizeOutput:
    """Main entry point for the normalizer component."""
    return run_normalize(inp)

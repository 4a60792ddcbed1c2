"""
Sequences component - Order-preserving concatenation.

Invariants:
- len(result) == sum of input lengths
- Elements appear sequence by sequence, each in its own order
- No reordering, no deduplication
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from .models import ConcatenateInput, ConcatenateOutput

T = TypeVar("T")


def concatenate(*sequences: Iterable[T]) -> list[T]:
    """Join sequences end to end. No arguments yields an empty list."""
    result: list[T] = []
    for seq in sequences:
        result.extend(seq)
    return result


def run_concatenate(inp: ConcatenateInput) -> ConcatenateOutput:
    """Concatenate the sequences carried by inp."""
    return ConcatenateOutput(items=concatenate(*inp.sequences))


def run(inp: ConcatenateInput) -> ConcatenateOutput:
    """Main entry point for the sequences component."""
    return run_concatenate(inp)

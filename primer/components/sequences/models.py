from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ConcatenateInput:
    """Input for concatenating zero or more sequences."""

    sequences: Sequence[Sequence[Any]] = field(default_factory=tuple)


@dataclass(frozen=True)
class ConcatenateOutput:
    """Output for concatenate operation."""

    items: list[Any]
    success: bool = True

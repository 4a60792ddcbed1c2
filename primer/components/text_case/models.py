"""
Text case component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatStringInput:
    """
    Input for formatting a string.

    to_upper is tri-state: True, False, or None for "use the default".
    """

    value: str
    to_upper: bool | None = None


@dataclass(frozen=True)
class FormatStringOutput:
    """Output for format operation."""

    value: str
    upper: bool
    success: bool = True

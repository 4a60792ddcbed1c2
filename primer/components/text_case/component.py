"""
Text case component - Upper/lower casing of strings.

Invariants:
- Pure: output depends only on the value and the flag
- Missing flag behaves exactly like True unless rules say otherwise
"""

from __future__ import annotations

from .models import FormatStringInput, FormatStringOutput
from .ports import TextCaseRulesPort

DEFAULT_UPPER = True


# --- Pure Functions (Functional Core) ---


def format_string(value: str, to_upper: bool | None = True) -> str:
    """
    Upper-case value when to_upper is true or None, else lower-case it.

    Args:
        value: Text to transform
        to_upper: Casing flag; None means the default (upper)

    Returns:
        The transformed string
    """
    if to_upper is None or to_upper:
        return value.upper()
    return value.lower()


# --- Component Entry Points ---


def run_format(
    inp: FormatStringInput,
    *,
    rules: TextCaseRulesPort | None = None,
) -> FormatStringOutput:
    """
    Format a string, resolving an absent flag from rules.

    Args:
        inp: Input containing the value and optional flag
        rules: Optional rules port supplying the default flag

    Returns:
        FormatStringOutput with the transformed value
    """
    upper = inp.to_upper
    if upper is None:
        upper = rules.get_default_upper() if rules is not None else DEFAULT_UPPER

    return FormatStringOutput(value=format_string(inp.value, upper), upper=upper)


def run(
    inp: FormatStringInput,
    *,
    rules: TextCaseRulesPort | None = None,
) -> FormatStringOutput:
    """Main entry point for the text case component."""
    return run_format(inp, rules=rules)

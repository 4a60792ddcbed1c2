"""
Text case component - Upper/lower casing of strings.
"""

from .component import format_string, run, run_format
from .models import FormatStringInput, FormatStringOutput
from .ports import TextCaseRulesPort

__all__ = [
    # Entry points
    "run",
    "run_format",
    # Pure functions
    "format_string",
    # Models
    "FormatStringInput",
    "FormatStringOutput",
    # Ports
    "TextCaseRulesPort",
]

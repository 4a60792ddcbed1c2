"""
Rules - optional tunables for the primer components.
"""

from .adapter import RulesAdapter
from .loader import DEFAULT_RULES_PATH, load_rules, load_rules_or_default
from .models import RatingsRules, Rules, SquareRules, TextCaseRules

__all__ = [
    "DEFAULT_RULES_PATH",
    "RatingsRules",
    "Rules",
    "RulesAdapter",
    "SquareRules",
    "TextCaseRules",
    "load_rules",
    "load_rules_or_default",
]

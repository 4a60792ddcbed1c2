"""
Normalizer component - Maps text or numbers onto a single number.
"""

from .component import process_value, run, run_normalize, to_normalizer_value
from .models import (
    NormalizeInput,
    NormalizeOutput,
    NormalizerValue,
    NumberValue,
    TextValue,
)

__all__ = [
    # Entry points
    "run",
    "run_normalize",
    # Pure functions
    "process_value",
    "to_normalizer_value",
    # Models
    "NormalizeInput",
    "NormalizeOutput",
    "NormalizerValue",
    "NumberValue",
    "TextValue",
]

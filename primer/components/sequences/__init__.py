"""
Sequences component - Order-preserving concatenation.
"""

from .component import concatenate, run, run_concatenate
from .models import ConcatenateInput, ConcatenateOutput

__all__ = [
    "run",
    "run_concatenate",
    "concatenate",
    "ConcatenateInput",
    "ConcatenateOutput",
]

"""
Square component - Delayed square computation.
"""

from .component import (
    DEFAULT_DELAY_SECONDS,
    NEGATIVE_NUMBER_MESSAGE,
    run,
    run_square,
    square_async,
)
from .models import (
    NegativeNumberError,
    SquareInput,
    SquareOutput,
    SquareValidationError,
)
from .ports import SleeperPort, SquareRulesPort

__all__ = [
    # Entry points
    "run",
    "run_square",
    # Coroutines
    "square_async",
    "DEFAULT_DELAY_SECONDS",
    "NEGATIVE_NUMBER_MESSAGE",
    # Models
    "NegativeNumberError",
    "SquareInput",
    "SquareOutput",
    "SquareValidationError",
    # Ports
    "SleeperPort",
    "SquareRulesPort",
]

"""
Square component - Delayed square computation.

Each call waits a fixed delay, then either returns n * n or raises
NegativeNumberError. The outcome is delivered exactly once and never before
the delay has elapsed. Calls share no state; run them concurrently with
asyncio.gather if needed.
"""

from __future__ import annotations

import logging

from primer.adapters.sleep import AsyncioSleeper

from .models import (
    NegativeNumberError,
    SquareInput,
    SquareOutput,
    SquareValidationError,
)
from .ports import SleeperPort, SquareRulesPort

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 1.0
NEGATIVE_NUMBER_MESSAGE = "Error: Negative number not allowed"


async def square_async(
    n: float,
    *,
    sleeper: SleeperPort | None = None,
    delay_seconds: float | None = None,
) -> float:
    """
    Square n after a fixed delay.

    Args:
        n: Number to square
        sleeper: Optional sleeper port (defaults to asyncio)
        delay_seconds: Delay before completing (defaults to 1 second)

    Returns:
        n * n

    Raises:
        NegativeNumberError: If n < 0, after the delay
    """
    if sleeper is None:
        sleeper = AsyncioSleeper()
    if delay_seconds is None:
        delay_seconds = DEFAULT_DELAY_SECONDS

    logger.debug("Squaring %s after %.3fs", n, delay_seconds)
    await sleeper.sleep(delay_seconds)

    if n < 0:
        logger.warning("Rejected negative input %s", n)
        raise NegativeNumberError(NEGATIVE_NUMBER_MESSAGE)

    result = n * n
    logger.debug("Squared %s -> %s", n, result)
    return result


async def run_square(
    inp: SquareInput,
    *,
    sleeper: SleeperPort | None = None,
    rules: SquareRulesPort | None = None,
) -> SquareOutput:
    """
    Run the delayed square and wrap the outcome.

    Args:
        inp: Input containing n
        sleeper: Optional sleeper port
        rules: Optional rules port for the delay

    Returns:
        SquareOutput with the value, or errors when n is negative
    """
    delay = rules.get_delay_seconds() if rules is not None else DEFAULT_DELAY_SECONDS

    try:
        value = await square_async(inp.n, sleeper=sleeper, delay_seconds=delay)
    except NegativeNumberError as e:
        return SquareOutput(
            value=None,
            errors=[SquareValidationError(code="NEGATIVE_INPUT", message=str(e))],
            success=False,
        )

    return SquareOutput(value=value)


async def run(
    inp: SquareInput,
    *,
    sleeper: SleeperPort | None = None,
    rules: SquareRulesPort | None = None,
) -> SquareOutput:
    """Main entry point for the square component."""
    return await run_square(inp, sleeper=sleeper, rules=rules)

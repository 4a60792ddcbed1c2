"""
Asyncio sleeper adapter.

Implements SleeperPort on top of the running event loop's timer.
"""

from __future__ import annotations

import asyncio


class AsyncioSleeper:
    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

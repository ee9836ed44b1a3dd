"""Debounce rapid successive calls down to the most recent one."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any


class Debouncer:
    """Run ``func`` only for the latest call after ``interval`` seconds of quiet.

    A call superseded while still waiting returns None. Once ``func`` has
    started it runs to completion; only the waiting window is superseded.
    """

    def __init__(self, interval: float, func: Callable[..., Awaitable[Any]]):
        self.interval = interval
        self.func = func
        self._generation = 0

    async def call(self, *args: Any) -> Any:
        self._generation += 1
        generation = self._generation
        await asyncio.sleep(self.interval)
        if generation != self._generation:
            return None
        return await self.func(*args)

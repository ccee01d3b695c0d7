from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable


class Ticker:
    """Fixed-cadence timer whose first tick is one interval from creation.

    A tick that is reached late fires immediately and the cadence restarts
    from that moment, so missed ticks are never replayed in a burst.
    """

    def __init__(
        self,
        interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._deadline = clock() + interval

    @property
    def deadline(self) -> float:
        return self._deadline

    async def wait(self) -> None:
        delay = self._deadline - self._clock()
        if delay > 0:
            await self._sleep(delay)
            fired = self._deadline
        else:
            fired = self._clock()
        self._deadline = fired + self.interval

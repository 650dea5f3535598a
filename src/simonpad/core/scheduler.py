"""Timer scheduling on the running asyncio loop."""

import asyncio
from collections.abc import Callable
from typing import Optional


class LoopScheduler:
    """
    Scheduler backed by `asyncio.AbstractEventLoop.call_later`.

    Callbacks run on the loop's thread, the same thread that delivers
    input (Textual runs its UI on this loop), so game state is only ever
    touched from one place. The loop is looked up lazily, which lets the
    scheduler be created before the application starts its loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        """Schedule `callback` after `delay` seconds; the handle supports cancel()."""
        return self.loop.call_later(max(delay, 0.0), callback)

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.5


class SearchDebouncer:
    """
    Coalesces rapid query updates into one downstream call per quiet period.

    Each ``update`` cancels the pending timer and starts a new one carrying
    the latest value; only a timer that fires uninterrupted forwards its value.
    """

    def __init__(
        self,
        on_settled: Callable[[str], Awaitable[object]],
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._on_settled = on_settled
        self._delay = delay
        self._timer: asyncio.TimerHandle | None = None
        self._running: set[asyncio.Future] = set()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def update(self, value: str) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._delay, self._fire, value)

    def cancel(self) -> None:
        """Drop the pending timer, if any. Calls already forwarded keep running."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def wait_settled(self) -> None:
        """Wait for every forwarded call that is still running."""
        while self._running:
            await asyncio.gather(*self._running, return_exceptions=True)

    def _fire(self, value: str) -> None:
        self._timer = None
        future = asyncio.ensure_future(self._on_settled(value))
        self._running.add(future)
        future.add_done_callback(self._on_done)

    def _on_done(self, future: asyncio.Future) -> None:
        self._running.discard(future)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("Debounced search call failed", exc_info=exc)

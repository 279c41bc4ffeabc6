"""Tick source — calls a function once per second on a monotonic schedule."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class Ticker:
    """Deliver zero-argument ticks at a fixed interval.

    Deadlines are computed from ``clock()`` at the start of :meth:`run`, so a
    slow callback delays one tick without shifting the ones after it.  The
    ticker is stopped with :meth:`stop` (pause) and may be run again
    afterwards (resume).
    """

    def __init__(
        self,
        callback: Callable[[], None],
        *,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._callback = callback
        self._interval = interval
        self._clock = clock
        self._sleep = sleep
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self, until: Callable[[], bool]) -> int:
        """Tick until *until()* is true or :meth:`stop` is called.

        Returns the number of ticks delivered.
        """
        self._running = True
        ticks = 0
        next_deadline = self._clock() + self._interval
        logger.debug("Ticker started: interval=%ss", self._interval)
        try:
            while self._running and not until():
                delay = next_deadline - self._clock()
                if delay > 0:
                    self._sleep(delay)
                if not self._running:
                    break
                self._callback()
                ticks += 1
                next_deadline += self._interval
        finally:
            self._running = False
            logger.debug("Ticker stopped after %s ticks", ticks)
        return ticks

    def stop(self) -> None:
        """Stop delivering ticks; :meth:`run` returns before the next one."""
        self._running = False

"""
ticker.py — Fixed-interval tick source driven by frame time.

The controller feeds it the milliseconds elapsed since the last frame;
it fires its callback once per whole interval while armed, never more
than once per frame.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class Ticker:
    def __init__(self, interval_ms: int, on_tick: Callable[[], None]):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._on_tick = on_tick
        self._elapsed: float = 0.0
        self._running: bool = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._elapsed = 0.0
        self._running = True
        logger.debug("Ticker started (%d ms).", self.interval_ms)

    def stop(self) -> None:
        if self._running:
            logger.debug("Ticker stopped.")
        self._running = False
        self._elapsed = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """
        Accumulate frame time and fire at most one tick. Returns ticks fired.
        A long frame never produces a burst: the backlog beyond one interval
        is dropped, keeping only the phase within the current interval.
        """
        if not self._running:
            return 0
        self._elapsed += elapsed_ms
        if self._elapsed < self.interval_ms:
            return 0
        self._elapsed = (self._elapsed - self.interval_ms) % self.interval_ms
        self._on_tick()
        return 1

# snakegame/core/timer.py
from __future__ import annotations
from typing import Callable, Optional


class ManualTimer:
    """Timer driven by explicit `fire()` calls (headless runs, tests)."""

    def __init__(self, callback: Optional[Callable[[], object]] = None):
        self.callback = callback
        self.interval_ms: Optional[int] = None
        self.starts = 0
        self.stops = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        self.starts += 1
        self._running = True

    def stop(self) -> None:
        self.stops += 1
        self._running = False

    def fire(self) -> bool:
        """Invoke the callback once if running; returns whether it fired."""
        if not self._running or self.callback is None:
            return False
        self.callback()
        return True

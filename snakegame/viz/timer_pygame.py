# snakegame/viz/timer_pygame.py
from __future__ import annotations
import pygame as pg

class PygameTimer:
    """Posts a custom event every interval; the window loop routes it to the session."""

    def __init__(self):
        if not pg.get_init():
            pg.init()
        self.event_type = pg.event.custom_type()
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self, interval_ms: int) -> None:
        pg.time.set_timer(self.event_type, interval_ms)
        self._running = True

    def stop(self) -> None:
        pg.time.set_timer(self.event_type, 0)
        self._running = False

    def is_tick(self, e: pg.event.Event) -> bool:
        return e.type == self.event_type

# snakegame/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Protocol

Cell = Tuple[int, int]

class Heading(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def delta(self) -> Cell:
        return self.value

    @property
    def reverse(self) -> "Heading":
        dx, dy = self.value
        return Heading((-dx, -dy))

class TickOutcome(Enum):
    CONTINUE = "continue"
    ATE = "ate"
    GAME_OVER = "game_over"

class GameEvent(Enum):
    MOVED = "moved"
    ATE = "ate"
    GAME_OVER = "game_over"

class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Cell, ...]   # tail first, head last
    food: Cell
    heading: Heading
    score: int
    alive: bool
    reason: str | None       # "wall" / "self" once dead
    tick_count: int
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Cell:
        return self.body[-1]

class EventListener(Protocol):
    def __call__(self, event: GameEvent) -> None: ...

class SoundSink(Protocol):
    def play(self, event: GameEvent) -> None: ...

class Timer(Protocol):
    """Fires the session's tick callback every `interval_ms` while running."""
    @property
    def running(self) -> bool: ...
    def start(self, interval_ms: int) -> None: ...
    def stop(self) -> None: ...

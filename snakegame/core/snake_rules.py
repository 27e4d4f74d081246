# snakegame/core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from typing import List, Optional, Iterable
from .interfaces import Cell, GameEvent, Heading, Snapshot, TickOutcome, EventListener
from .grid import Grid
from ..config import AppConfig

class SnakeRules:
    """One game's worth of simulation state: body, heading, food and score.

    The body is stored tail first, so the head is always ``body[-1]``.
    Collisions are terminal state, not errors: once dead, ``tick`` is a no-op.
    """

    def __init__(self, cfg: AppConfig, grid: Optional[Grid] = None,
                 listeners: Iterable[EventListener] = ()):
        self.cfg = cfg
        self.grid = grid if grid is not None else Grid(cfg.grid_w, cfg.grid_h, seed=cfg.seed)
        self._listeners: List[EventListener] = list(listeners)
        self._reset_state()

    def _reset_state(self):
        self.body: List[Cell] = [(i, 0) for i in range(self.cfg.initial_snake_length)]
        self.heading = Heading.RIGHT
        self.food = self.grid.place_food()
        self.score = 0
        self.tick_count = 0
        self.alive = True
        self.reason: Optional[str] = None

    def reset(self) -> Snapshot:
        self._reset_state()
        return self.snapshot()

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in self._listeners:
            listener(event)

    @property
    def head(self) -> Cell:
        return self.body[-1]

    def set_heading(self, requested: Heading) -> bool:
        if not self.alive or requested is self.heading.reverse:
            return False
        self.heading = requested
        self._emit(GameEvent.MOVED)
        return True

    def tick(self) -> TickOutcome:
        if not self.alive:
            return TickOutcome.GAME_OVER
        self.tick_count += 1

        hx, hy = self.head
        outcome = TickOutcome.CONTINUE
        if (hx, hy) == self.food:
            self.score += 1
            self.food = self.grid.place_food()
            outcome = TickOutcome.ATE
            self._emit(GameEvent.ATE)
        else:
            self.body.pop(0)

        dx, dy = self.heading.delta
        new_head = (hx + dx, hy + dy)

        # collisions against the body as it stands after the tail step
        if not self.grid.contains(new_head):
            return self._die("wall")
        if new_head in self.body:
            return self._die("self")

        self.body.append(new_head)
        return outcome

    def _die(self, reason: str) -> TickOutcome:
        self.alive, self.reason = False, reason
        self._emit(GameEvent.GAME_OVER)
        return TickOutcome.GAME_OVER

    def snapshot(self) -> Snapshot:
        return Snapshot(
            body=tuple(self.body),
            food=self.food,
            heading=self.heading,
            score=self.score,
            alive=self.alive,
            reason=self.reason,
            tick_count=self.tick_count,
            grid_w=self.grid.width,
            grid_h=self.grid.height,
        )

# snakegame/core/session.py
from __future__ import annotations
from typing import Optional, Callable, TYPE_CHECKING
from .interfaces import GameEvent, GameState, Heading, Snapshot, SoundSink, TickOutcome, Timer
from .grid import Grid
from .snake_rules import SnakeRules
from ..config import AppConfig

if TYPE_CHECKING:
    from ..viz.render_iface import Renderer
    from ..stats.hooks import GameStats

ARROW_KEYS = {
    "ArrowLeft": Heading.LEFT,
    "ArrowRight": Heading.RIGHT,
    "ArrowUp": Heading.UP,
    "ArrowDown": Heading.DOWN,
}


class GameSession:
    """Drives one player's games: timer ticks in, frames and sounds out.

    All calls are expected from a single event loop. Renderer and sound failures
    are reported and swallowed here so they can never stop the simulation.
    """

    def __init__(
        self,
        cfg: AppConfig,
        renderer: "Renderer",
        timer: Timer,
        sound: Optional[SoundSink] = None,
        stats: Optional["GameStats"] = None,
        grid: Optional[Grid] = None,
    ):
        self.cfg = cfg
        self.renderer = renderer
        self.timer = timer
        self.sound = sound
        self.stats = stats
        self.grid = grid if grid is not None else Grid(cfg.grid_w, cfg.grid_h, seed=cfg.seed)
        self.rules: Optional[SnakeRules] = None
        self.state = GameState.GAME_OVER
        self.games_played = 0
        self._started = False

    # ---- lifecycle ----
    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._new_game()

    def restart(self) -> bool:
        if not self._started or self.state is GameState.RUNNING:
            return False
        self._new_game()
        return True

    def _new_game(self) -> None:
        self.rules = SnakeRules(self.cfg, self.grid)
        self.rules.subscribe(self._on_event)
        self.state = GameState.RUNNING
        self._safe(self.renderer.draw_frame, self.rules.snapshot())
        self.timer.start(self.cfg.tick_interval_ms)

    # ---- callbacks ----
    def on_timer(self) -> TickOutcome | None:
        if self.state is not GameState.RUNNING or self.rules is None:
            return None
        outcome = self.rules.tick()
        snap = self.rules.snapshot()
        if outcome is TickOutcome.GAME_OVER:
            self.timer.stop()
            self.state = GameState.GAME_OVER
            self.games_played += 1
            self._safe(self.renderer.draw_game_over, snap)
            if self.stats is not None:
                self._safe(self.stats.on_game_over, snap)
        else:
            self._safe(self.renderer.draw_frame, snap)
        return outcome

    def handle_key(self, key: str) -> bool:
        """Returns True when the key changed something."""
        if self.state is GameState.RUNNING:
            heading = ARROW_KEYS.get(key)
            if heading is None or self.rules is None:
                return False
            return self.rules.set_heading(heading)
        if key == self.cfg.restart_key:
            return self.restart()
        return False

    # ---- queries ----
    @property
    def score(self) -> int:
        return self.rules.score if self.rules is not None else 0

    def snapshot(self) -> Optional[Snapshot]:
        return self.rules.snapshot() if self.rules is not None else None

    # ---- helpers ----
    def _on_event(self, event: GameEvent) -> None:
        if self.sound is not None:
            self._safe(self.sound.play, event)

    def _safe(self, fn: Callable, *args) -> None:
        try:
            fn(*args)
        except Exception as e:
            print(f"[session] {getattr(fn, '__qualname__', fn)} failed: {e!r}")

# snakegame/runners/run_headless.py
from __future__ import annotations
import random
from typing import List, Optional
from ..config import AppConfig
from ..core.interfaces import GameState, Heading
from ..core.session import GameSession, ARROW_KEYS
from ..core.timer import ManualTimer
from ..stats.hooks import GameStats
from ..stats.logging import make_logger
from ..viz.render_iface import Renderer
from ..viz.renderer_headless import HeadlessRenderer
from ..viz.sound_pygame import NullSound

KEY_FOR = {h: k for k, h in ARROW_KEYS.items()}

class RandomPilot:
    """Turns now and then, preferring moves that stay on the board and off the body."""

    def __init__(self, seed: Optional[int] = None, turn_prob: float = 0.2):
        self.rng = random.Random(seed)
        self.turn_prob = turn_prob

    def choose(self, session: GameSession) -> Optional[str]:
        snap = session.snapshot()
        if snap is None or not snap.alive:
            return None
        hx, hy = snap.head
        # the tail only moves away when the head is not on food
        occupied = set(snap.body if snap.head == snap.food else snap.body[1:])

        def safe(h: Heading) -> bool:
            nx, ny = hx + h.delta[0], hy + h.delta[1]
            return 0 <= nx < snap.grid_w and 0 <= ny < snap.grid_h and (nx, ny) not in occupied

        if safe(snap.heading) and self.rng.random() >= self.turn_prob:
            return None
        options = [h for h in Heading if h is not snap.heading.reverse and safe(h)]
        if not options:
            return None
        return KEY_FOR[self.rng.choice(options)]


def play_games(cfg: AppConfig, games: int, max_ticks: int = 5000,
               stats: Optional[GameStats] = None) -> List[int]:
    """Plays `games` games back to back and returns their final scores."""
    rend: Renderer = HeadlessRenderer(keep_frames=False)
    rend.open(cfg)
    timer = ManualTimer()
    session = GameSession(cfg, rend, timer, sound=NullSound(), stats=stats)
    timer.callback = session.on_timer
    pilot = RandomPilot(seed=cfg.seed)

    scores: List[int] = []
    session.start()
    for g in range(games):
        if g > 0:
            session.handle_key(cfg.restart_key)
        for _ in range(max_ticks):
            key = pilot.choose(session)
            if key is not None:
                session.handle_key(key)
            if not timer.fire():
                break
        scores.append(session.score)
        if session.state is GameState.RUNNING:
            print(f"[headless] game {g + 1} still alive after {max_ticks} ticks, stopping")
            break
    rend.close()
    return scores


def main(cfg: AppConfig, games: int = 10, max_ticks: int = 5000) -> List[int]:
    stats = GameStats(make_logger(cfg.log_csv))
    try:
        scores = play_games(cfg, games, max_ticks=max_ticks, stats=stats)
    finally:
        stats.close()
    mean = sum(scores) / len(scores) if scores else 0.0
    print(f"[headless] games={len(scores)} mean_score={mean:.2f} best={max(scores, default=0)}")
    return scores

from __future__ import annotations
from typing import Any, Dict, Optional
from ..core.interfaces import Snapshot
from .logging import Logger, NullLogger
from .metrics import EMA, ScoreWindow


class GameStats:
    """Per-session game summaries. The best score is kept in memory only."""

    def __init__(self, logger: Optional[Logger] = None, verbose: bool = True):
        self.logger = logger if logger is not None else NullLogger()
        self.verbose = verbose
        self.ema_score = EMA(0.05)
        self.window = ScoreWindow(100)
        self.games = 0

    @property
    def best_score(self) -> int:
        return self.window.best

    def on_game_over(self, snap: Snapshot) -> Dict[str, Any]:
        self.games += 1
        self.window.add(snap.score)
        s_ema = self.ema_score.update(snap.score)
        summary = self.window.summary()

        scalars = {
            "game/score": snap.score,
            "game/length": len(snap.body),
            "game/ticks": snap.tick_count,
            "game/death_wall": 1.0 if snap.reason == "wall" else 0.0,
            "game/death_self": 1.0 if snap.reason == "self" else 0.0,
            "game/score_ema": s_ema,
            "game/score_mean100": summary["mean"],
            "game/best_score": self.best_score,
        }
        self.logger.log(self.games, scalars)
        self.logger.flush()

        if self.verbose:
            print(f"[game {self.games}] score={snap.score} length={len(snap.body)} "
                  f"ticks={snap.tick_count} reason={snap.reason} best={self.best_score}")
        return scalars

    def close(self) -> None:
        self.logger.close()

# snakegame/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from ..config import AppConfig
from ..core.interfaces import Snapshot
from ..core.board import board_rows

class HeadlessRenderer:
    """Keeps what it was asked to draw instead of drawing it."""

    def __init__(self, keep_frames: bool = True):
        self.keep_frames = keep_frames
        self.cfg: Optional[AppConfig] = None
        self.frames: List[Snapshot] = []
        self.frame_count = 0
        self.game_over: Optional[Snapshot] = None
        self.last: Optional[Snapshot] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg

    def draw_frame(self, snap: Snapshot) -> None:
        self.frame_count += 1
        self.last = snap
        self.game_over = None
        if self.keep_frames:
            self.frames.append(snap)

    def draw_game_over(self, snap: Snapshot) -> None:
        self.last = snap
        self.game_over = snap

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        self.frames.clear()

    def text(self) -> str:
        if self.last is None:
            return ""
        rows = board_rows(self.last)
        rows.append(f"Score: {self.last.score}")
        if self.game_over is not None:
            rows.append(f"Game Over! ({self.game_over.reason})")
        return "\n".join(rows)

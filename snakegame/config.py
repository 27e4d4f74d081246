# snakegame/config.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

CANVAS_W = 1000
CANVAS_H = 600
CELL_SIZE = 30

@dataclass(frozen=True, slots=True)
class AppConfig:
    # world
    grid_w: int = CANVAS_W // CELL_SIZE
    grid_h: int = CANVAS_H // CELL_SIZE
    cell_size: int = CELL_SIZE
    seed: Optional[int] = None

    # gameplay
    tick_interval_ms: int = 150
    initial_snake_length: int = 5
    restart_key: str = " "
    fps: int = 60                        # event polling rate of the window loop

    # render
    render_title: str = "Snake"
    render_grid_lines: bool = True
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # sound
    sound_enabled: bool = True
    sound_dir: Optional[str] = None

    # logging
    log_csv: Optional[str] = None

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_w}x{self.grid_h}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if not 1 <= self.initial_snake_length <= self.grid_w:
            raise ValueError(
                f"initial_snake_length={self.initial_snake_length} does not fit a grid {self.grid_w} cells wide"
            )

    @classmethod
    def from_canvas(cls, width_px: int, height_px: int, cell_size: int = CELL_SIZE, **kwargs) -> "AppConfig":
        """Grid dimensions from a pixel canvas; partial cells are dropped."""
        return cls(grid_w=width_px // cell_size, grid_h=height_px // cell_size, cell_size=cell_size, **kwargs)

    @property
    def window_size(self) -> tuple[int, int]:
        return self.grid_w * self.cell_size, self.grid_h * self.cell_size

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

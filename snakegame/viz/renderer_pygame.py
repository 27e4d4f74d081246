# snakegame/viz/renderer_pygame.py
from __future__ import annotations
import os
from typing import Optional, Union
import pygame as pg
from ..config import AppConfig
from ..core.interfaces import Snapshot
from . import renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

class PygameRenderer:
    def __init__(self):
        self.cell = 30
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._fonts: dict[int, pg.font.Font] = {}

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.cell_size

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(cfg.window_size)
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, cfg: AppConfig, surface: pg.Surface) -> None:
        """Draw into a caller-owned surface; the caller flips and paces."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.cell_size
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def draw_frame(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            w, h = s.grid_w * c, s.grid_h * c
            for x in range(0, w, c):
                for y in range(0, h, c):
                    pg.draw.rect(surf, theme.GRID, pg.Rect(x, y, c, c), width=1)

        last = len(s.body) - 1
        for i, (x, y) in enumerate(s.body):
            col = theme.HEAD if i == last else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c - 2, c - 2), border_radius=5)

        fx, fy = s.food
        pg.draw.circle(surf, theme.FOOD, (fx * c + c // 2, fy * c + c // 2), c // 2 - 2)

        if self.cfg.render_show_hud:
            txt = self._font(24).render(f"Score: {s.score}", True, theme.TEXT)
            surf.blit(txt, (20, 10))

        self._present()

    def draw_game_over(self, s: Snapshot) -> None:
        """Overlay on top of the last frame, which stays visible underneath."""
        assert self.surf is not None, "Renderer not opened"
        surf = self.surf
        w, h = surf.get_size()

        title = self._font(50).render("Game Over!", True, theme.TEXT)
        surf.blit(title, (w // 3, h // 2 - title.get_height()))
        hint = self._font(20).render(f"Score: {s.score}  -  Press Space to Restart", True, theme.TEXT)
        surf.blit(hint, (w // 3, h // 2 + 20))

        self._present()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._fonts.clear()

    # internals
    def _font(self, size: int) -> pg.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pg.font.SysFont(None, size)
        return font

    def _present(self) -> None:
        if self._auto_flip:
            pg.display.flip()
        if self.cfg is not None and self.cfg.render_record_dir:
            self._save_surface_frame()

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1

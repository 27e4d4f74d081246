# snakegame/runners/run_snake.py
from __future__ import annotations
import pygame as pg
from ..config import AppConfig
from ..core.session import GameSession
from ..stats.hooks import GameStats
from ..stats.logging import make_logger
from ..viz.keyboard import Keyboard
from ..viz.render_iface import Renderer
from ..viz.renderer_pygame import PygameRenderer
from ..viz.sound_pygame import PygameSound, NullSound
from ..viz.timer_pygame import PygameTimer

def main(cfg: AppConfig) -> None:
    rend: Renderer = PygameRenderer()
    rend.open(cfg)

    timer = PygameTimer()
    sound = PygameSound(cfg) if cfg.sound_enabled else NullSound()
    stats = GameStats(make_logger(cfg.log_csv))
    session = GameSession(cfg, rend, timer, sound=sound, stats=stats)
    kbd = Keyboard()

    session.start()
    running = True
    try:
        while running:
            for e in pg.event.get():
                if timer.is_tick(e):
                    session.on_timer()
                    continue
                key = kbd.translate(e)
                if key == "quit":
                    running = False
                    break
                if key is not None:
                    session.handle_key(key)
            rend.tick(cfg.fps)
    finally:
        timer.stop()
        stats.close()
        rend.close()

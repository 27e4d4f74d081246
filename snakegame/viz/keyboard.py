# snakegame/viz/keyboard.py
from __future__ import annotations
from typing import Optional
import pygame as pg

KEY_NAMES = {
    pg.K_LEFT: "ArrowLeft",
    pg.K_RIGHT: "ArrowRight",
    pg.K_UP: "ArrowUp",
    pg.K_DOWN: "ArrowDown",
    pg.K_SPACE: " ",
}

class Keyboard:
    """Maps pygame events to the key names the session understands."""

    def translate(self, e: pg.event.Event) -> Optional[str]:
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE:
                return "quit"
            if e.key in KEY_NAMES:
                return KEY_NAMES[e.key]
            # other keys by their character
            return getattr(e, "unicode", "") or pg.key.name(e.key) or None
        return None

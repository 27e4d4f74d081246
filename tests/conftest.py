# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window or need a sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running from a source checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from snakegame.config import AppConfig
from snakegame.core.grid import Grid
from snakegame.core.snake_rules import SnakeRules
from snakegame.core.session import GameSession
from snakegame.core.timer import ManualTimer
from snakegame.viz.renderer_headless import HeadlessRenderer

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    return AppConfig(seed=1234, sound_enabled=False)

class FixedGrid(Grid):
    """Grid whose food comes from a script, then falls back to the far corner."""
    def __init__(self, width, height, foods=()):
        super().__init__(width, height, seed=0)
        self.foods = list(foods)
        self.calls = 0

    def place_food(self):
        self.calls += 1
        if self.foods:
            return self.foods.pop(0)
        return (self.width - 1, self.height - 1)

class RecordingSound:
    def __init__(self):
        self.events = []
    def play(self, event):
        self.events.append(event)

@pytest.fixture
def grid_factory():
    def make(width=33, height=20, foods=()):
        return FixedGrid(width, height, foods)
    return make

@pytest.fixture
def rules_factory(cfg, grid_factory):
    def make(foods=(), listeners=(), **overrides):
        c = cfg.with_(**overrides) if overrides else cfg
        return SnakeRules(c, grid_factory(c.grid_w, c.grid_h, foods), listeners=listeners)
    return make

@pytest.fixture
def sound():
    return RecordingSound()

@pytest.fixture
def session_factory(cfg, grid_factory, sound):
    def make(foods=(), renderer=None, stats=None, **overrides):
        c = cfg.with_(**overrides) if overrides else cfg
        timer = ManualTimer()
        session = GameSession(
            c, renderer or HeadlessRenderer(), timer,
            sound=sound, stats=stats, grid=grid_factory(c.grid_w, c.grid_h, foods),
        )
        timer.callback = session.on_timer
        return session, timer
    return make

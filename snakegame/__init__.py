# snakegame/__init__.py
from .config import AppConfig
from .core.interfaces import Cell, GameEvent, GameState, Heading, Snapshot, TickOutcome
from .core.grid import Grid
from .core.snake_rules import SnakeRules
from .core.session import GameSession

__all__ = [
    "AppConfig",
    "Cell", "GameEvent", "GameState", "Heading", "Snapshot", "TickOutcome",
    "Grid", "SnakeRules", "GameSession",
]

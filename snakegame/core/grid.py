# snakegame/core/grid.py  (bounds + food placement, no pygame)
from __future__ import annotations
import random
from typing import Optional
from .interfaces import Cell

class Grid:
    def __init__(self, width: int, height: int, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random(seed)

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def place_food(self) -> Cell:
        # uniform over every cell; the snake is not excluded
        return (self.rng.randrange(self.width), self.rng.randrange(self.height))

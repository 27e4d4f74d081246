# snakegame/core/board.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Snapshot

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3
GLYPHS = {EMPTY: ".", BODY: "o", HEAD: "H", FOOD: "F"}

def encode_board(s: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) int8 board; the head wins over food when they share a cell."""
    grid = np.full((s.grid_h, s.grid_w), EMPTY, dtype=np.int8)
    fx, fy = s.food
    grid[fy, fx] = FOOD
    for (x, y) in s.body[:-1]:
        grid[y, x] = BODY
    if s.body:  # a length-1 snake that hits a wall dies with no cells left
        hx, hy = s.head
        grid[hy, hx] = HEAD
    return grid

def board_rows(s: Snapshot) -> List[str]:
    grid = encode_board(s)
    return ["".join(GLYPHS[int(v)] for v in row) for row in grid]

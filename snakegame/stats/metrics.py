from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Optional

class EMA:
    """Exponential moving average; the first sample seeds it."""
    def __init__(self, alpha: float):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.value: Optional[float] = None

    def update(self, x: float) -> float:
        x = float(x)
        if self.value is None:
            self.value = x
        else:
            self.value += self.alpha * (x - self.value)
        return self.value

class ScoreWindow:
    """Last `window` final scores plus the best seen this session."""
    def __init__(self, window: int = 100):
        self.scores: Deque[int] = deque(maxlen=window)
        self.best = 0

    def add(self, score: int) -> None:
        self.scores.append(int(score))
        self.best = max(self.best, int(score))

    def summary(self) -> Dict[str, float]:
        if not self.scores:
            return {"count": 0, "mean": 0.0, "min": 0.0, "max": 0.0, "best": float(self.best)}
        n = len(self.scores)
        return {
            "count": n,
            "mean": sum(self.scores) / n,
            "min": float(min(self.scores)),
            "max": float(max(self.scores)),
            "best": float(self.best),
        }

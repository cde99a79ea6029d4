from __future__ import annotations
from collections import deque
from typing import Deque, Optional

class EMA:
    """Exponential moving average of game scores."""
    def __init__(self, alpha: float):
        self.alpha = alpha
        self.value: Optional[float] = None
    def update(self, score: float) -> float:
        if self.value is None:
            self.value = float(score)
        else:
            self.value += self.alpha * (score - self.value)
        return self.value

class WindowedStat:
    """Mean score over the last ``window`` games."""
    def __init__(self, window: int):
        self.scores: Deque[float] = deque(maxlen=window)
    def add(self, score: float) -> None:
        self.scores.append(float(score))
    def mean(self) -> float:
        return sum(self.scores) / len(self.scores) if self.scores else 0.0

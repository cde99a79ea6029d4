# tilesnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Protocol

Pos = Tuple[int, int]

RIGHT: Pos = (1, 0)
LEFT: Pos = (-1, 0)
DOWN: Pos = (0, 1)
UP: Pos = (0, -1)
DIRS: Tuple[Pos, ...] = (RIGHT, DOWN, LEFT, UP)


def is_reverse(a: Pos, b: Pos) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Command(Enum):
    """What a key press asks the game to do."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    RESTART = "restart"
    QUIT = "quit"

    @property
    def is_direction(self) -> bool:
        return isinstance(self.value, tuple)


@dataclass(frozen=True)
class Snapshot:
    head: Pos
    body: Tuple[Pos, ...]               # index 0 nearest the head
    food: Pos
    velocity: Pos
    tick_interval_ms: int
    game_over: bool
    high_score: int
    food_eaten: int
    tick_count: int
    cols: int
    rows: int

    @property
    def score(self) -> int:
        """Body length, head excluded."""
        return len(self.body)

    @property
    def cells(self) -> Tuple[Pos, ...]:
        return (self.head, *self.body)


class Timer(Protocol):
    """Host timer that fires the tick callback; new intervals apply to later ticks."""
    def start(self, interval_ms: int) -> None: ...
    def set_interval(self, interval_ms: int) -> None: ...
    def stop(self) -> None: ...

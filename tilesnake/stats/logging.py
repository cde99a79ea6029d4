from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

from tilesnake.core.interfaces import Snapshot
from tilesnake.stats.metrics import EMA, WindowedStat

GAME_KEYS = [
    "game", "score", "high_score", "food_eaten", "ticks",
    "final_interval_ms", "score_ema", "score_mean100",
]

class Logger(Protocol):
    def log(self, row: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, row: Dict[str, Any]) -> None:
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # don't crash on unseen keys
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def make_game_logger(
    logger: Logger,
    *,
    ema_score: EMA | None = None,
    win_score: WindowedStat | None = None,
) -> Callable[[Snapshot], None]:
    """
    Returns a function(snap: Snapshot) -> None for the controller's game-over
    hook: updates rolling score stats and writes one row per finished game.
    """
    ema_score = ema_score or EMA(0.1)
    win_score = win_score or WindowedStat(100)
    games = 0

    def _on_game_over(snap: Snapshot) -> None:
        nonlocal games
        games += 1
        ema = ema_score.update(snap.score)
        win_score.add(snap.score)
        logger.log({
            "game": games,
            "score": snap.score,
            "high_score": snap.high_score,
            "food_eaten": snap.food_eaten,
            "ticks": snap.tick_count,
            "final_interval_ms": snap.tick_interval_ms,
            "score_ema": round(ema, 3),
            "score_mean100": round(win_score.mean(), 3),
        })
        logger.flush()

    return _on_game_over

# tilesnake/runners/run_headless.py
from __future__ import annotations
import logging
from typing import List, Optional

import numpy as np

from tilesnake.config import AppConfig
from tilesnake.core.controller import GameController
from tilesnake.core.interfaces import Command, Snapshot
from tilesnake.stats.logging import CSVLogger, GAME_KEYS, make_game_logger
from tilesnake.runners.timers import ManualTimer
from tilesnake.viz.renderer_headless import HeadlessRenderer

logger = logging.getLogger(__name__)

TURNS = (Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT)


def main(cfg: Optional[AppConfig] = None) -> List[Snapshot]:
    """Random-turn autoplay without a display; returns the final snapshot of each game."""
    cfg = cfg or AppConfig()
    # separate from the game's own food RNG
    rng = np.random.default_rng(cfg.seed)

    csv_log = CSVLogger(cfg.log_path, fieldnames=GAME_KEYS) if cfg.log_path else None
    on_game_over = make_game_logger(csv_log) if csv_log else None

    rend = HeadlessRenderer()
    rend.open(cfg)
    timer = ManualTimer()
    ctl = GameController(cfg, timer, on_game_over=on_game_over)

    print("=== Snake (headless) ===")
    print(f"grid: {cfg.cols}x{cfg.rows}  games: {cfg.games}  max_ticks: {cfg.max_ticks}")

    results: List[Snapshot] = []
    try:
        for game in range(cfg.games):
            if game:
                ctl.start()
            snap = ctl.snapshot()
            while timer.running and snap.tick_count < cfg.max_ticks:
                if rng.random() < cfg.turn_prob:
                    ctl.on_command(TURNS[int(rng.integers(len(TURNS)))])
                snap = ctl.on_tick()
                rend.draw(snap)
            if not snap.game_over:
                logger.info("game %d hit max_ticks=%d", game + 1, cfg.max_ticks)
            results.append(snap)
            print(f"[game {game + 1}] score={snap.score} high={snap.high_score} "
                  f"food={snap.food_eaten} ticks={snap.tick_count} interval={snap.tick_interval_ms}ms")
    finally:
        if csv_log:
            csv_log.close()
        rend.close()
    return results

# tilesnake/runners/run_snake.py
from __future__ import annotations
import logging
from typing import Optional

import pygame as pg

from tilesnake.config import AppConfig
from tilesnake.core.controller import GameController
from tilesnake.core.interfaces import Command
from tilesnake.stats.logging import CSVLogger, GAME_KEYS, make_game_logger
from tilesnake.runners.timers import PygameTimer, TICK_EVENT
from tilesnake.viz.keyboard import to_command
from tilesnake.viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)


def main(cfg: Optional[AppConfig] = None) -> int:
    """Interactive game; returns the session high score."""
    cfg = cfg or AppConfig()

    rend = PygameRenderer()
    rend.open(cfg)

    csv_log = CSVLogger(cfg.log_path, fieldnames=GAME_KEYS) if cfg.log_path else None
    on_game_over = make_game_logger(csv_log) if csv_log else None

    print("=== Snake ===")
    print(f"grid: {cfg.cols}x{cfg.rows}  tick: {cfg.base_tick_ms}ms -> {cfg.min_tick_ms}ms")

    timer = PygameTimer(TICK_EVENT)
    ctl = GameController(cfg, timer, on_game_over=on_game_over)
    try:
        rend.draw(ctl.snapshot())
        running = True
        while running:
            e = pg.event.wait()
            if e.type == TICK_EVENT:
                snap = ctl.on_tick()
                if snap.game_over:
                    print(f"[game {ctl.games_played}] score={snap.score} high={snap.high_score} "
                          f"food={snap.food_eaten} ticks={snap.tick_count}")
            else:
                cmd = to_command(e)
                if cmd is None:
                    continue
                if cmd is Command.QUIT:
                    running = False
                    continue
                snap = ctl.on_command(cmd)
            rend.draw(snap)
    finally:
        timer.stop()
        if csv_log:
            csv_log.close()
        rend.close()
    logger.info("session over, high score %d", ctl.snapshot().high_score)
    return ctl.snapshot().high_score

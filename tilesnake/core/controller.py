# tilesnake/core/controller.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from .interfaces import Command, Snapshot, Timer
from .snake_rules import Rules
from tilesnake.config import AppConfig

logger = logging.getLogger(__name__)

GameOverHook = Callable[[Snapshot], None]


class GameController:
    """Owns the single game instance and keeps the host timer in step with it.

    The host forwards timer ticks to ``on_tick`` and key presses to
    ``on_command``, then redraws from ``snapshot()``.
    """

    def __init__(
        self,
        cfg: AppConfig,
        timer: Timer,
        *,
        rules: Optional[Rules] = None,
        on_game_over: Optional[GameOverHook] = None,
    ):
        self.cfg = cfg
        self.timer = timer
        self.rules = rules if rules is not None else Rules(cfg)
        self.on_game_over = on_game_over
        self.games_played = 0
        self._interval = cfg.base_tick_ms
        self.start()

    def start(self) -> Snapshot:
        snap = self.rules.reset()
        self._interval = snap.tick_interval_ms
        self.timer.stop()
        self.timer.start(self._interval)
        return snap

    def on_tick(self) -> Snapshot:
        if not self.rules.should_continue():
            self.timer.stop()
            return self.rules.snapshot()

        snap = self.rules.tick()
        if snap.tick_interval_ms != self._interval:
            self._interval = snap.tick_interval_ms
            self.timer.set_interval(self._interval)
            logger.debug("tick interval now %dms", self._interval)

        if snap.game_over:
            self.timer.stop()
            self.games_played += 1
            if self.on_game_over is not None:
                self.on_game_over(snap)
        return snap

    def on_command(self, cmd: Command) -> Snapshot:
        if cmd is Command.RESTART:
            if self.rules.game_over:
                return self.start()
        elif cmd.is_direction:
            self.rules.set_direction(cmd.value)
        return self.rules.snapshot()

    def snapshot(self) -> Snapshot:
        return self.rules.snapshot()

# tilesnake/core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import List, Optional

from .interfaces import DIRS, RIGHT, Pos, Snapshot, is_reverse
from tilesnake.config import AppConfig

logger = logging.getLogger(__name__)


class Rules:
    """Fixed-tick snake state machine on a toroidal grid.

    The host calls ``tick()`` from its timer and ``set_direction()`` from its
    keyboard source, serialized on one thread. ``high_score`` lives as long as
    the instance; ``reset()`` keeps it.
    """

    def __init__(self, cfg: AppConfig):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cols, self.rows = cfg.cols, cfg.rows
        self.rng = random.Random(cfg.seed)
        self.high_score = 0
        self._reset_state()

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def _reset_state(self):
        cx, cy = self.cols // 2, self.rows // 2
        self.head: Pos = (cx, cy)
        self.body: List[Pos] = [(cx - i, cy) for i in range(1, self.cfg.start_len)]
        self.velocity: Pos = RIGHT
        self.game_over = False
        self.tick_interval_ms = self.cfg.base_tick_ms
        self.food_eaten = 0
        self.tick_count = 0
        self.food = self._place_food()

    def reset(self) -> Snapshot:
        self._reset_state()
        logger.debug("reset: head=%s food=%s high_score=%d", self.head, self.food, self.high_score)
        return self.snapshot()

    def _occupied(self, p: Pos) -> bool:
        return p == self.head or p in self.body

    def _place_food(self) -> Pos:
        # rejection sampling; the grid is far larger than any reachable snake
        while True:
            p = (self.rng.randrange(self.cols), self.rng.randrange(self.rows))
            if not self._occupied(p):
                return p

    def set_direction(self, requested: Pos) -> bool:
        """Adopt ``requested`` unless the game is over or it reverses the snake.

        Returns True when the velocity changed.
        """
        requested = tuple(requested)
        if requested not in DIRS:
            raise ValueError(f"not a unit direction: {requested!r}")
        if self.game_over:
            return False
        if is_reverse(requested, self.velocity):
            # ignore invalid reverse; keep current direction
            return False
        changed = requested != self.velocity
        self.velocity = requested
        return changed

    def _wrap(self, x: int, y: int) -> Pos:
        if x < 0: x = self.cols - 1
        elif x >= self.cols: x = 0
        if y < 0: y = self.rows - 1
        elif y >= self.rows: y = 0
        return (x, y)

    def tick(self) -> Snapshot:
        if self.game_over:
            return self.snapshot()
        self.tick_count += 1

        # body follows the head, old tail cell is dropped
        old_head = self.head
        if self.body:
            self.body = [old_head] + self.body[:-1]

        hx, hy = old_head
        dx, dy = self.velocity
        self.head = self._wrap(hx + dx, hy + dy)

        if self.head == self.food:
            # duplicate the tail; the next tick separates it
            self.body.append(self.body[-1] if self.body else old_head)
            self.food_eaten += 1
            self.food = self._place_food()
            if self.tick_interval_ms > self.cfg.min_tick_ms:
                self.tick_interval_ms = max(self.cfg.min_tick_ms,
                                            self.tick_interval_ms - self.cfg.speed_step_ms)
            logger.debug("food eaten at %s (len=%d), interval=%dms, next food=%s",
                         self.head, len(self.body), self.tick_interval_ms, self.food)

        if self.head in self.body:
            self.game_over = True
            self.high_score = max(self.high_score, len(self.body))
            logger.info("game over after %d ticks: score=%d high=%d",
                        self.tick_count, len(self.body), self.high_score)
        return self.snapshot()

    def should_continue(self) -> bool:
        return not self.game_over

    def snapshot(self) -> Snapshot:
        return Snapshot(
            head=self.head,
            body=tuple(self.body),
            food=self.food,
            velocity=self.velocity,
            tick_interval_ms=self.tick_interval_ms,
            game_over=self.game_over,
            high_score=self.high_score,
            food_eaten=self.food_eaten,
            tick_count=self.tick_count,
            cols=self.cols,
            rows=self.rows,
        )

# tilesnake/runners/timers.py
from __future__ import annotations
from typing import List, Optional

import pygame as pg

TICK_EVENT = pg.USEREVENT + 1


class PygameTimer:
    """Posts TICK_EVENT every ``interval_ms`` via pygame.time.set_timer."""
    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.interval_ms: Optional[int] = None

    def start(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        pg.time.set_timer(self.event_type, interval_ms)

    def set_interval(self, interval_ms: int) -> None:
        # re-arming from inside the tick handler only affects later ticks
        if self.interval_ms is not None:
            self.start(interval_ms)
        else:
            self.interval_ms = interval_ms

    def stop(self) -> None:
        self.interval_ms = None
        pg.time.set_timer(self.event_type, 0)


class ManualTimer:
    """Timer for headless runs: the caller ticks by hand, intervals are only recorded."""
    def __init__(self):
        self.running = False
        self.interval_ms: Optional[int] = None
        self.history: List[int] = []

    def start(self, interval_ms: int) -> None:
        self.running = True
        self.interval_ms = interval_ms
        self.history.append(interval_ms)

    def set_interval(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        self.history.append(interval_ms)

    def stop(self) -> None:
        self.running = False

# tilesnake/config.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    board_w: int = 600
    board_h: int = 600
    tile: int = 25
    seed: Optional[int] = None

    # gameplay
    start_len: int = 3                   # head + 2 body segments
    base_tick_ms: int = 100
    min_tick_ms: int = 40
    speed_step_ms: int = 5               # per food eaten

    # render
    render_title: str = "Snake"
    render_font: str = "Inter"
    render_pad: int = 4                  # inset of circles inside a tile
    render_record_dir: Optional[str] = None

    # logging
    log_path: Optional[str] = None       # CSV of finished games, None = off

    # headless runs
    games: int = 5
    max_ticks: int = 2_000
    turn_prob: float = 0.15

    def __post_init__(self):
        if self.board_w <= 0 or self.board_h <= 0 or self.tile <= 0:
            raise ValueError("board and tile sizes must be positive")
        if self.board_w % self.tile or self.board_h % self.tile:
            raise ValueError(f"board {self.board_w}x{self.board_h} is not a multiple of tile {self.tile}")
        if self.min_tick_ms <= 0 or self.min_tick_ms > self.base_tick_ms:
            raise ValueError("need 0 < min_tick_ms <= base_tick_ms")
        if self.speed_step_ms < 0:
            raise ValueError("speed_step_ms must be >= 0")
        if self.start_len < 1 or self.start_len > self.cols // 2 + 1:
            raise ValueError(f"start_len {self.start_len} does not fit a {self.cols}-column grid")
        if self.cols * self.rows <= self.start_len:
            raise ValueError(f"start_len {self.start_len} leaves no free cell for food on a {self.cols}x{self.rows} grid")
        if not 0.0 <= self.turn_prob <= 1.0:
            raise ValueError("turn_prob must be in [0, 1]")

    @property
    def cols(self) -> int:
        return self.board_w // self.tile

    @property
    def rows(self) -> int:
        return self.board_h // self.tile

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

# tilesnake/viz/renderer.py  (pure: Snapshot -> draw commands, no pygame)
from __future__ import annotations
from typing import List

import numpy as np

import tilesnake.viz.renderer_colors as theme
from tilesnake.config import AppConfig
from tilesnake.core.interfaces import Pos, Snapshot
from tilesnake.viz.render_iface import (
    Color, DrawCommand, FillEllipse, FillRect, GradientRect, Line, Text,
)

GAME_OVER_TEXT = "Game Over"
RESTART_TEXT = "Press ENTER to Restart"


def blend(a: Color, b: Color, t: float) -> Color:
    """Per-channel linear blend from ``a`` (t=0) to ``b`` (t=1), t clamped."""
    t = float(np.clip(t, 0.0, 1.0))
    mixed = np.asarray(a, dtype=np.float64) * (1.0 - t) + np.asarray(b, dtype=np.float64) * t
    return tuple(int(c) for c in mixed)


def _tile_circle(p: Pos, cfg: AppConfig) -> tuple:
    c, pad = cfg.tile, cfg.render_pad
    d = c - 2 * pad
    return (p[0] * c + pad, p[1] * c + pad, d, d)


def render(s: Snapshot, cfg: AppConfig) -> List[DrawCommand]:
    W, H, c = cfg.board_w, cfg.board_h, cfg.tile
    cmds: List[DrawCommand] = [GradientRect((0, 0, W, H), theme.BG_TOP, theme.BG_BOTTOM)]

    for col in range(s.cols + 1):
        cmds.append(Line((col * c, 0), (col * c, H), theme.GRID))
    for row in range(s.rows + 1):
        cmds.append(Line((0, row * c), (W, row * c), theme.GRID))

    cmds.append(FillEllipse(_tile_circle(s.food, cfg), theme.FOOD))

    # tail first so segments nearer the head end up on top
    n = len(s.body)
    for i in range(n - 1, -1, -1):
        t = i / max(1, n - 1)
        cmds.append(FillEllipse(_tile_circle(s.body[i], cfg), blend(theme.BODY_NEAR, theme.BODY_FAR, t)))
    cmds.append(FillEllipse(_tile_circle(s.head, cfg), theme.HEAD))

    cmds.append(Text(f"Score: {s.score}", (10, 20), 16, theme.TEXT, bold=True))
    cmds.append(Text(f"High: {s.high_score}", (10, 40), 16, theme.TEXT, bold=True))

    if s.game_over:
        cmds.append(FillRect((0, 0, W, H), theme.OVERLAY))
        cmds.append(Text(GAME_OVER_TEXT, (W // 2, (H - 20) // 2), 36, theme.TEXT, bold=True, centered=True))
        cmds.append(Text(RESTART_TEXT, (W // 2, (H + 20) // 2), 18, theme.TEXT, centered=True))
    return cmds

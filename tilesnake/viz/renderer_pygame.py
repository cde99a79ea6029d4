# tilesnake/viz/renderer_pygame.py
from __future__ import annotations
import logging
import os
from typing import Dict, Optional, Tuple, Union

import numpy as np
import pygame as pg

from tilesnake.config import AppConfig
from tilesnake.core.interfaces import Snapshot
from tilesnake.viz.render_iface import Color, Point, Rect, Renderer, execute
from tilesnake.viz.renderer import render

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, os.PathLike]


def _has_alpha(color: Color) -> bool:
    return len(color) == 4 and color[3] < 255


class PygameSurface:
    """Drawing primitives over a pygame.Surface; translucent colours are blended."""

    def __init__(self, surf: pg.Surface, font_name: Optional[str] = None):
        self.surf = surf
        self.font_name = font_name
        self._fonts: Dict[Tuple[int, bool], pg.font.Font] = {}

    def _font(self, size: int, bold: bool) -> pg.font.Font:
        key = (size, bold)
        font = self._fonts.get(key)
        if font is None:
            if not pg.font.get_init():
                pg.font.init()
            font = pg.font.SysFont(self.font_name, size, bold=bold)
            self._fonts[key] = font
        return font

    def fill_rect(self, rect: Rect, color: Color) -> None:
        if _has_alpha(color):
            layer = pg.Surface(rect[2:], pg.SRCALPHA)
            layer.fill(color)
            self.surf.blit(layer, rect[:2])
        else:
            pg.draw.rect(self.surf, color[:3], pg.Rect(rect))

    def fill_gradient(self, rect: Rect, top: Color, bottom: Color) -> None:
        x, y, w, h = rect
        t = np.linspace(0.0, 1.0, num=h)[:, None]
        rows = np.asarray(top[:3], dtype=np.float64) * (1.0 - t) + np.asarray(bottom[:3], dtype=np.float64) * t
        # surfarray is indexed [x, y, channel]
        pixels = np.broadcast_to(rows[None, :, :], (w, h, 3)).astype(np.uint8)
        self.surf.blit(pg.surfarray.make_surface(pixels), (x, y))

    def fill_ellipse(self, rect: Rect, color: Color) -> None:
        if _has_alpha(color):
            layer = pg.Surface(rect[2:], pg.SRCALPHA)
            pg.draw.ellipse(layer, color, layer.get_rect())
            self.surf.blit(layer, rect[:2])
        else:
            pg.draw.ellipse(self.surf, color[:3], pg.Rect(rect))

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        if not _has_alpha(color):
            pg.draw.line(self.surf, color[:3], start, end)
            return
        left, top = min(start[0], end[0]), min(start[1], end[1])
        w, h = abs(end[0] - start[0]) + 1, abs(end[1] - start[1]) + 1
        layer = pg.Surface((w, h), pg.SRCALPHA)
        pg.draw.line(layer, color, (start[0] - left, start[1] - top), (end[0] - left, end[1] - top))
        self.surf.blit(layer, (left, top))

    def draw_text(self, text: str, pos: Point, size: int, color: Color, bold: bool = False) -> None:
        font = self._font(size, bold)
        img = font.render(text, True, color[:3])
        self.surf.blit(img, (pos[0], pos[1] - font.get_ascent()))

    def text_width(self, text: str, size: int, bold: bool = False) -> int:
        return self._font(size, bold).size(text)[0]


class PygameRenderer(Renderer):
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.canvas: Optional[PygameSurface] = None
        self._auto_flip = True
        self._frame_idx = 0

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.board_w, cfg.board_h))
        self.canvas = PygameSurface(self.surf, cfg.render_font)
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface instead of the display."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.surf = surface
        self.canvas = PygameSurface(surface, cfg.render_font)
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        if self.canvas is None or self.cfg is None:
            raise RuntimeError("Renderer not opened")
        execute(render(s, self.cfg), self.canvas)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.canvas = None

    def save_frame(self, s: Snapshot) -> None:
        if self.cfg is None:
            raise RuntimeError("Renderer config not set (call open first)")
        if not self.cfg.render_record_dir or self.surf is None:
            return
        self._save_surface_frame()

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        os.makedirs(rec_dir, exist_ok=True)
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        logger.debug("saved %s", fname)
        self._frame_idx += 1

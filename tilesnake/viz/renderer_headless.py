# tilesnake/viz/renderer_headless.py
from __future__ import annotations
from typing import Any, List, Optional, Tuple

from tilesnake.config import AppConfig
from tilesnake.core.interfaces import Snapshot
from tilesnake.viz.render_iface import Color, DrawCommand, Point, Rect, Renderer, execute
from tilesnake.viz.renderer import render


class HeadlessSurface:
    """Records primitive calls instead of drawing them."""

    def __init__(self, char_w: float = 0.5):
        self.char_w = char_w     # fraction of the font size per character
        self.calls: List[Tuple[str, Any]] = []

    def fill_rect(self, rect: Rect, color: Color) -> None:
        self.calls.append(("fill_rect", (rect, color)))

    def fill_gradient(self, rect: Rect, top: Color, bottom: Color) -> None:
        self.calls.append(("fill_gradient", (rect, top, bottom)))

    def fill_ellipse(self, rect: Rect, color: Color) -> None:
        self.calls.append(("fill_ellipse", (rect, color)))

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        self.calls.append(("draw_line", (start, end, color)))

    def draw_text(self, text: str, pos: Point, size: int, color: Color, bold: bool = False) -> None:
        self.calls.append(("draw_text", (text, pos, size, color, bold)))

    def text_width(self, text: str, size: int, bold: bool = False) -> int:
        return int(len(text) * size * self.char_w)


class HeadlessRenderer(Renderer):
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surface = HeadlessSurface()
        self.last: List[DrawCommand] = []
        self.frames = 0

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames = 0

    def draw(self, snap: Snapshot) -> None:
        if self.cfg is None:
            raise RuntimeError("Renderer not opened")
        self.last = render(snap, self.cfg)
        self.surface.calls.clear()
        execute(self.last, self.surface)
        self.frames += 1

    def close(self) -> None:
        pass

    def save_frame(self, snap: Snapshot) -> None:
        pass  # nothing to save

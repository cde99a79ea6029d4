# tilesnake/viz/render_iface.py
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Protocol, Tuple, Union

if TYPE_CHECKING:
    from tilesnake.config import AppConfig
    from tilesnake.core.interfaces import Snapshot

Color = Tuple[int, ...]               # RGB or RGBA
Rect = Tuple[int, int, int, int]      # x, y, w, h
Point = Tuple[int, int]


@dataclass(frozen=True)
class FillRect:
    rect: Rect
    color: Color

@dataclass(frozen=True)
class GradientRect:
    """Vertical gradient, ``top`` at the first row and ``bottom`` at the last."""
    rect: Rect
    top: Color
    bottom: Color

@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color

@dataclass(frozen=True)
class FillEllipse:
    """Ellipse inscribed in ``rect``."""
    rect: Rect
    color: Color

@dataclass(frozen=True)
class Text:
    text: str
    pos: Point            # left end of the baseline, or its midpoint when centered
    size: int
    color: Color
    bold: bool = False
    centered: bool = False


DrawCommand = Union[FillRect, GradientRect, Line, FillEllipse, Text]


class Surface(Protocol):
    def fill_rect(self, rect: Rect, color: Color) -> None: ...
    def fill_gradient(self, rect: Rect, top: Color, bottom: Color) -> None: ...
    def fill_ellipse(self, rect: Rect, color: Color) -> None: ...
    def draw_line(self, start: Point, end: Point, color: Color) -> None: ...
    def draw_text(self, text: str, pos: Point, size: int, color: Color, bold: bool = False) -> None: ...
    def text_width(self, text: str, size: int, bold: bool = False) -> int: ...


class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def close(self) -> None: ...
    def save_frame(self, snap: Snapshot) -> None: ...


def execute(commands: Iterable[DrawCommand], surface: Surface) -> None:
    """Replay draw commands, back to front, onto a surface."""
    for cmd in commands:
        if isinstance(cmd, FillRect):
            surface.fill_rect(cmd.rect, cmd.color)
        elif isinstance(cmd, GradientRect):
            surface.fill_gradient(cmd.rect, cmd.top, cmd.bottom)
        elif isinstance(cmd, Line):
            surface.draw_line(cmd.start, cmd.end, cmd.color)
        elif isinstance(cmd, FillEllipse):
            surface.fill_ellipse(cmd.rect, cmd.color)
        elif isinstance(cmd, Text):
            x, y = cmd.pos
            if cmd.centered:
                x -= surface.text_width(cmd.text, cmd.size, cmd.bold) // 2
            surface.draw_text(cmd.text, (x, y), cmd.size, cmd.color, cmd.bold)
        else:
            raise TypeError(f"unknown draw command {cmd!r}")

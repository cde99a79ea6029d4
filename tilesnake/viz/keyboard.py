# tilesnake/viz/keyboard.py
from typing import Optional

import pygame as pg

from tilesnake.core.interfaces import Command

KEYMAP = {
    pg.K_UP: Command.UP, pg.K_w: Command.UP,
    pg.K_DOWN: Command.DOWN, pg.K_s: Command.DOWN,
    pg.K_LEFT: Command.LEFT, pg.K_a: Command.LEFT,
    pg.K_RIGHT: Command.RIGHT, pg.K_d: Command.RIGHT,
    pg.K_RETURN: Command.RESTART, pg.K_KP_ENTER: Command.RESTART,
    pg.K_ESCAPE: Command.QUIT,
}


def to_command(e: pg.event.Event) -> Optional[Command]:
    if e.type == pg.QUIT:
        return Command.QUIT
    if e.type == pg.KEYDOWN:
        return KEYMAP.get(e.key)
    return None

# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running without an install
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from tilesnake.config import AppConfig
from tilesnake.core.interfaces import RIGHT
from tilesnake.core.snake_rules import Rules

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def rules(cfg):
    return Rules(cfg)

@pytest.fixture
def screen(cfg):
    # Plain Surface is fine for draw tests (no need for display mode)
    return pg.Surface((cfg.board_w, cfg.board_h))

@pytest.fixture
def crash_setup():
    """Lay out a hook-shaped snake whose next DOWN move bites its own body.

    head (5,5) moving right; body wraps under it. ``extra`` adds tail
    segments so the final score is 4 + extra.
    """
    def make(rules, extra=0):
        rules.head = (5, 5)
        rules.body = [(4, 5), (4, 6), (5, 6), (6, 6)] + [(7 + i, 6) for i in range(extra)]
        rules.velocity = RIGHT
        rules.food = (0, 0)
        return rules
    return make

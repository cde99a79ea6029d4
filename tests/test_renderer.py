# tests/test_renderer.py
import tilesnake.viz.renderer_colors as theme
from tilesnake.core.interfaces import DOWN
from tilesnake.viz.render_iface import FillEllipse, FillRect, GradientRect, Line, Text, execute
from tilesnake.viz.renderer import GAME_OVER_TEXT, RESTART_TEXT, blend, render
from tilesnake.viz.renderer_headless import HeadlessRenderer, HeadlessSurface


def test_blend_endpoints_and_clamp():
    a, b = (80, 220, 120), (20, 160, 90)
    assert blend(a, b, 0.0) == a
    assert blend(a, b, 1.0) == b
    assert blend(a, b, -3.0) == a
    assert blend(a, b, 7.0) == b
    assert blend((0, 0, 0), (100, 200, 50), 0.5) == (50, 100, 25)

def test_layers_in_back_to_front_order(rules, cfg):
    rules.reset()
    rules.food = (3, 4)
    cmds = render(rules.snapshot(), cfg)

    assert cmds[0] == GradientRect((0, 0, 600, 600), theme.BG_TOP, theme.BG_BOTTOM)
    lines = cmds[1:51]
    assert all(isinstance(c, Line) and c.color == theme.GRID for c in lines)
    assert lines[0] == Line((0, 0), (0, 600), theme.GRID)
    assert lines[-1] == Line((0, 600), (600, 600), theme.GRID)

    food, tail, near, head = cmds[51:55]
    assert food == FillEllipse((3 * 25 + 4, 4 * 25 + 4, 17, 17), theme.FOOD)
    assert tail == FillEllipse((10 * 25 + 4, 12 * 25 + 4, 17, 17), theme.BODY_FAR)
    assert near == FillEllipse((11 * 25 + 4, 12 * 25 + 4, 17, 17), theme.BODY_NEAR)
    assert head == FillEllipse((12 * 25 + 4, 12 * 25 + 4, 17, 17), theme.HEAD)

    score, high = cmds[55:57]
    assert isinstance(score, Text) and score.text == "Score: 2"
    assert isinstance(high, Text) and high.text == "High: 0"
    assert len(cmds) == 57
    assert not any(isinstance(c, FillRect) for c in cmds)

def test_body_colors_fade_toward_tail(rules, cfg):
    rules.reset()
    rules.body = [(11 - i, 12) for i in range(5)]
    body = [c for c in render(rules.snapshot(), cfg) if isinstance(c, FillEllipse)][1:-1]
    # drawn tail first
    assert body[0].color == theme.BODY_FAR
    assert body[-1].color == theme.BODY_NEAR
    greens = [c.color[1] for c in body]
    assert greens == sorted(greens)

def test_game_over_overlay(rules, cfg, crash_setup):
    crash_setup(rules)
    rules.set_direction(DOWN)
    snap = rules.tick()
    cmds = render(snap, cfg)
    overlay, title, hint = cmds[-3:]
    assert overlay == FillRect((0, 0, 600, 600), theme.OVERLAY)
    assert title.text == GAME_OVER_TEXT and title.centered and title.bold
    assert hint.text == RESTART_TEXT and hint.centered
    assert title.pos[1] < hint.pos[1]
    assert any(isinstance(c, Text) and c.text == "High: 4" for c in cmds)

def test_render_does_not_touch_state(rules, cfg):
    before = rules.snapshot()
    render(before, cfg)
    render(before, cfg)
    assert rules.snapshot() == before

def test_execute_centers_text():
    surf = HeadlessSurface(char_w=0.5)
    execute([Text("abcd", (300, 290), 20, theme.TEXT, centered=True)], surf)
    (name, (text, pos, size, color, bold)), = surf.calls
    assert name == "draw_text"
    # width = 4 chars * 20 * 0.5 = 40
    assert pos == (300 - 20, 290)

def test_headless_renderer_replays_every_command(rules, cfg):
    rend = HeadlessRenderer()
    rend.open(cfg)
    rend.draw(rules.snapshot())
    rend.draw(rules.snapshot())
    assert rend.frames == 2
    assert len(rend.surface.calls) == len(rend.last)
    assert rend.surface.calls[0][0] == "fill_gradient"

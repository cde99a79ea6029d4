# tests/test_controller.py
from tilesnake.core.controller import GameController
from tilesnake.core.interfaces import Command, DOWN, RIGHT
from tilesnake.runners.timers import ManualTimer


def _controller(cfg, **kwargs):
    timer = ManualTimer()
    return GameController(cfg, timer, **kwargs), timer

def test_start_arms_timer_at_base_interval(cfg):
    ctl, timer = _controller(cfg)
    assert timer.running
    assert timer.interval_ms == 100
    assert ctl.snapshot().head == (12, 12)

def test_eating_pushes_new_interval_to_timer(cfg):
    ctl, timer = _controller(cfg)
    ctl.rules.food = (13, 12)
    snap = ctl.on_tick()
    assert snap.tick_interval_ms == 95
    assert timer.interval_ms == 95
    assert timer.history == [100, 95]

def test_plain_tick_leaves_timer_alone(cfg):
    ctl, timer = _controller(cfg)
    ctl.rules.food = (0, 0)
    ctl.on_tick()
    assert timer.history == [100]

def test_direction_commands_reach_rules(cfg):
    ctl, _ = _controller(cfg)
    ctl.on_command(Command.DOWN)
    assert ctl.rules.velocity == DOWN
    ctl.on_command(Command.UP)      # reversal, dropped
    assert ctl.rules.velocity == DOWN
    ctl.on_command(Command.QUIT)    # host's business
    assert ctl.snapshot().velocity == DOWN

def test_game_over_stops_timer_and_fires_hook_once(cfg, crash_setup):
    seen = []
    ctl, timer = _controller(cfg, on_game_over=seen.append)
    crash_setup(ctl.rules)
    ctl.on_command(Command.DOWN)
    over = ctl.on_tick()
    assert over.game_over
    assert not timer.running
    assert seen == [over]
    assert ctl.games_played == 1

    assert ctl.on_tick() == over
    assert len(seen) == 1

def test_restart_only_after_game_over(cfg, crash_setup):
    ctl, timer = _controller(cfg)
    ctl.rules.food = (0, 0)
    ctl.on_tick()
    snap = ctl.on_command(Command.RESTART)
    assert snap.tick_count == 1

    crash_setup(ctl.rules, extra=1)
    ctl.on_command(Command.DOWN)
    ctl.on_tick()
    fresh = ctl.on_command(Command.RESTART)
    assert not fresh.game_over
    assert fresh.high_score == 5
    assert fresh.velocity == RIGHT
    assert fresh.tick_interval_ms == 100
    assert timer.running and timer.interval_ms == 100

def test_restart_resets_sped_up_timer(cfg, crash_setup):
    ctl, timer = _controller(cfg)
    ctl.rules.food = (13, 12)
    ctl.on_tick()
    assert timer.interval_ms == 95
    crash_setup(ctl.rules)
    ctl.on_command(Command.DOWN)
    ctl.on_tick()
    ctl.on_command(Command.RESTART)
    assert timer.interval_ms == 100

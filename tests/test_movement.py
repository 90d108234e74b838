"""Tests for movement and centering through the generated commands."""

from __future__ import annotations

import pytest

from keydrag.core.direction import DIRECTIONS, SpeedMode
from keydrag.core.errors import InvalidWindowError, PlacementStrategyMissingError
from keydrag.core.hooks import HookEvent
from keydrag.core.steps import StepConfig


@pytest.mark.parametrize("direction", DIRECTIONS, ids=lambda d: d.name)
def test_normal_command_moves_by_configured_step(kd, settings, window, direction):
    settings.horizontal_step = 15
    settings.vertical_step = 7

    kd.catalog.execute(direction.name, window)

    assert (window.x, window.y) == (100 + direction.h * 15, 100 + direction.v * 7)


@pytest.mark.parametrize("direction", DIRECTIONS, ids=lambda d: d.name)
def test_slow_command_moves_one_pixel(kd, settings, window, direction):
    settings.horizontal_step = 40
    settings.vertical_step = 25

    kd.catalog.execute(direction.name + "-slowly", window)

    assert (window.x, window.y) == (100 + direction.h, 100 + direction.v)
    assert settings.steps() == StepConfig(40, 25)


def test_example_scenario(kd, window):
    kd.catalog.execute("right", window)
    assert (window.x, window.y) == (110, 100)

    kd.catalog.execute("upright-slowly", window)
    assert (window.x, window.y) == (111, 99)


@pytest.mark.parametrize("speed", list(SpeedMode))
@pytest.mark.parametrize("direction", DIRECTIONS, ids=lambda d: d.name)
def test_move_then_opposite_returns_home(kd, window, direction, speed):
    kd.move(window, direction.h, direction.v, speed)
    kd.move(window, direction.opposite.h, direction.opposite.v, speed)

    assert (window.x, window.y) == (100, 100)


def test_one_position_query_and_one_move_per_invocation(kd, host, window):
    kd.catalog.execute("downleft", window)

    assert host.count("position") == 1
    assert host.count("move") == 1


def test_steps_read_at_invocation_time(kd, settings, window):
    kd.catalog.execute("right", window)
    settings.horizontal_step = 50
    kd.catalog.execute("right", window)

    assert window.x == 100 + 10 + 50


def test_after_move_hook_sees_direction_not_position(kd, window):
    recorded: list[tuple[int, int]] = []
    kd.add_hook(HookEvent.AFTER_MOVE, lambda w, h, v: recorded.append((h, v)))

    kd.catalog.execute("down", window)

    assert recorded == [(0, 1)]


def test_hooks_wrap_the_host_call(kd, host, window):
    order: list[str] = []
    kd.add_hook(HookEvent.BEFORE_MOVE, lambda w, h, v: order.append(f"before {host.count('move')}"))
    kd.add_hook(HookEvent.AFTER_MOVE, lambda w, h, v: order.append(f"after {host.count('move')}"))

    kd.catalog.execute("left-slowly", window)

    assert order == ["before 0", "after 1"]


def test_after_hook_can_query_new_position(kd, host, window):
    positions: list[tuple[int, int]] = []
    kd.add_hook(HookEvent.AFTER_MOVE, lambda w, h, v: positions.append(host.window_position(w)))

    kd.catalog.execute("up", window)

    assert positions == [(100, 90)]


def test_failing_before_hook_aborts_move(kd, host, settings, window):
    after: list[object] = []

    def boom(w, h, v):
        raise RuntimeError("before-move failed")

    kd.add_hook(HookEvent.BEFORE_MOVE, boom)
    kd.add_hook(HookEvent.AFTER_MOVE, lambda w, h, v: after.append(w))

    with pytest.raises(RuntimeError):
        kd.catalog.execute("right-slowly", window)

    assert (window.x, window.y) == (100, 100)
    assert host.count("move") == 0
    assert after == []
    assert settings.steps() == StepConfig(10, 10)


def test_host_failure_propagates_and_skips_after_hook(kd, host, window):
    before: list[object] = []
    after: list[object] = []
    kd.add_hook(HookEvent.BEFORE_MOVE, lambda w, h, v: before.append(w))
    kd.add_hook(HookEvent.AFTER_MOVE, lambda w, h, v: after.append(w))
    window.valid = False

    with pytest.raises(InvalidWindowError):
        kd.catalog.execute("upleft", window)

    assert before == [window]
    assert after == []


def test_failed_slow_move_leaves_steps_untouched(kd, host, settings, window):
    settings.vertical_step = 33
    host.fail_moves = True

    with pytest.raises(InvalidWindowError):
        kd.catalog.execute("down-slowly", window)

    assert settings.steps() == StepConfig(10, 33)

    host.fail_moves = False
    kd.catalog.execute("down", window)
    assert window.y == 133


def test_reentrant_slow_move_from_hook(kd, window, make_window):
    other = make_window("other", x=0, y=0)
    fired: list[bool] = []

    def follow(w, h, v):
        if w is window and not fired:
            fired.append(True)
            kd.catalog.execute("right", other)

    kd.add_hook(HookEvent.BEFORE_MOVE, follow)
    kd.catalog.execute("right-slowly", window)

    assert window.x == 101
    assert other.x == 10


def test_move_rejects_zero_direction(kd, host, window):
    calls: list[object] = []
    kd.add_hook(HookEvent.BEFORE_MOVE, lambda w, h, v: calls.append(w))

    with pytest.raises(ValueError):
        kd.move(window, 0, 0)

    assert calls == []
    assert host.calls == []


def test_center(kd, host, window):
    order: list[str] = []
    kd.add_hook(HookEvent.BEFORE_CENTER, lambda w: order.append("before"))
    kd.add_hook(HookEvent.AFTER_CENTER, lambda w: order.append("after"))

    kd.catalog.execute("center", window)

    # 1000x800 work area, 200x100 window
    assert (window.x, window.y) == (400, 350)
    assert order == ["before", "after"]
    assert ("placement", "centered", "editor") in host.calls


def test_center_without_strategy(kd, host, window):
    host.placements.unregister("centered")
    before: list[object] = []
    after: list[object] = []
    kd.add_hook(HookEvent.BEFORE_CENTER, before.append)
    kd.add_hook(HookEvent.AFTER_CENTER, after.append)

    with pytest.raises(PlacementStrategyMissingError):
        kd.center(window)

    assert before == [window]
    assert after == []
    assert (window.x, window.y) == (100, 100)


def test_run_uses_active_window(kd, host, window):
    assert kd.run("left") is False

    host.active = window
    assert kd.run("keydrag-left") is True
    assert window.x == 90

"""Tests for HookRegistry ordering and failure policy."""

from __future__ import annotations

import logging

import pytest

from keydrag.core.hooks import HookEvent, HookRegistry


def test_dispatch_in_registration_order_with_same_args():
    hooks = HookRegistry()
    seen: list[tuple] = []
    for label in ("A", "B", "C"):
        hooks.register(
            HookEvent.BEFORE_MOVE,
            lambda w, h, v, label=label: seen.append((label, w, h, v)),
        )

    hooks.dispatch(HookEvent.BEFORE_MOVE, ("win", 1, -1))

    assert seen == [("A", "win", 1, -1), ("B", "win", 1, -1), ("C", "win", 1, -1)]


def test_events_are_independent():
    hooks = HookRegistry()
    calls: list[str] = []
    hooks.register(HookEvent.BEFORE_CENTER, lambda w: calls.append("before-center"))
    hooks.register("after-center", lambda w: calls.append("after-center"))

    hooks.dispatch(HookEvent.AFTER_MOVE, ("win", 0, 1))
    assert calls == []

    hooks.dispatch("after-center", ("win",))
    assert calls == ["after-center"]
    assert hooks.count(HookEvent.BEFORE_CENTER) == 1
    assert hooks.count() == 2


def test_duplicates_are_kept():
    hooks = HookRegistry()
    calls: list[int] = []

    def cb(w: object) -> None:
        calls.append(1)

    hooks.register(HookEvent.AFTER_CENTER, cb)
    hooks.register(HookEvent.AFTER_CENTER, cb)
    hooks.dispatch(HookEvent.AFTER_CENTER, ("win",))

    assert calls == [1, 1]


def test_failure_stops_chain_and_propagates():
    hooks = HookRegistry()
    calls: list[str] = []

    def boom(w, h, v):
        raise RuntimeError("hook failed")

    hooks.register(HookEvent.BEFORE_MOVE, lambda w, h, v: calls.append("A"))
    hooks.register(HookEvent.BEFORE_MOVE, boom)
    hooks.register(HookEvent.BEFORE_MOVE, lambda w, h, v: calls.append("C"))

    with pytest.raises(RuntimeError, match="hook failed"):
        hooks.dispatch(HookEvent.BEFORE_MOVE, ("win", 1, 0))

    assert calls == ["A"]


def test_isolated_failures_are_logged_and_skipped(caplog):
    hooks = HookRegistry(isolate_failures=True)
    calls: list[str] = []

    def boom(w):
        raise RuntimeError("hook failed")

    hooks.register(HookEvent.AFTER_CENTER, boom)
    hooks.register(HookEvent.AFTER_CENTER, lambda w: calls.append("after"))

    with caplog.at_level(logging.ERROR, logger="keydrag.core.hooks"):
        hooks.dispatch(HookEvent.AFTER_CENTER, ("win",))

    assert calls == ["after"]
    assert "after-center" in caplog.text


def test_wrong_argument_shape_rejected():
    hooks = HookRegistry()
    with pytest.raises(ValueError):
        hooks.dispatch(HookEvent.BEFORE_MOVE, ("win",))
    with pytest.raises(ValueError):
        hooks.dispatch(HookEvent.AFTER_CENTER, ("win", 0, 1))


def test_register_rejects_unknown_event_and_non_callable():
    hooks = HookRegistry()
    with pytest.raises(ValueError):
        hooks.register("during-move", lambda *a: None)
    with pytest.raises(TypeError):
        hooks.register(HookEvent.AFTER_MOVE, "not callable")


def test_callback_registered_during_dispatch_runs_next_time():
    hooks = HookRegistry()
    calls: list[str] = []

    def late(w):
        calls.append("late")

    def first(w):
        calls.append("first")
        hooks.register(HookEvent.BEFORE_CENTER, late)

    hooks.register(HookEvent.BEFORE_CENTER, first)
    hooks.dispatch(HookEvent.BEFORE_CENTER, ("win",))
    assert calls == ["first"]

    hooks.dispatch(HookEvent.BEFORE_CENTER, ("win",))
    assert calls == ["first", "first", "late"]

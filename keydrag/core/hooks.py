"""
keydrag.core.hooks - Extension points around move and center.

Four independent, ordered callback lists:

    before-move    (window, h, v)
    after-move     (window, h, v)
    before-center  (window,)
    after-center   (window,)

Callbacks run synchronously, in registration order, each receiving the
same argument tuple. Lists only grow through register(); they are never
reordered or deduplicated.

Failure policy: by default a failing callback stops the chain and its
exception propagates to whoever triggered the move or center, so the
matching "after" hooks never run. A registry built with
isolate_failures=True logs each failure and keeps going instead.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any

log = logging.getLogger(__name__)


class HookEvent(enum.Enum):
    """Named lifecycle points that accept callbacks."""

    BEFORE_MOVE = "before-move"
    AFTER_MOVE = "after-move"
    BEFORE_CENTER = "before-center"
    AFTER_CENTER = "after-center"

    @property
    def arity(self) -> int:
        """Number of positional arguments each callback receives."""
        if self in (HookEvent.BEFORE_MOVE, HookEvent.AFTER_MOVE):
            return 3
        return 1


# Move hooks receive (window, h, v); center hooks receive (window,)
HookCallback = Callable[..., Any]


class HookRegistry:
    """
    Ordered callback lists for every HookEvent.

    Usage:
        hooks = HookRegistry()
        hooks.register(HookEvent.AFTER_MOVE, warp_pointer)
        hooks.dispatch(HookEvent.AFTER_MOVE, (window, 1, 0))
    """

    def __init__(self, isolate_failures: bool = False) -> None:
        self._callbacks: dict[HookEvent, list[HookCallback]] = {
            ev: [] for ev in HookEvent
        }
        self._isolate_failures = isolate_failures

    @property
    def isolate_failures(self) -> bool:
        return self._isolate_failures

    def register(self, event: HookEvent | str, callback: HookCallback) -> None:
        """Append *callback* to the list for *event*."""
        event = HookEvent(event)
        if not callable(callback):
            raise TypeError(f"Hook callback must be callable, got {callback!r}")
        self._callbacks[event].append(callback)
        log.debug(
            "Hook registered: %s -> %s (%d total)",
            event.value,
            getattr(callback, "__qualname__", callback),
            len(self._callbacks[event]),
        )

    def count(self, event: HookEvent | str | None = None) -> int:
        if event is None:
            return sum(len(cbs) for cbs in self._callbacks.values())
        return len(self._callbacks[HookEvent(event)])

    def dispatch(self, event: HookEvent | str, args: tuple[Any, ...]) -> None:
        """
        Call every callback for *event* with *args*, in registration order.

        Args:
            event: The lifecycle point being reached.
            args:  Positional arguments passed unchanged to each callback.

        Raises:
            ValueError: If *args* does not match the event's argument shape.
            Exception:  Whatever a callback raises, unless failures are
                        isolated.
        """
        event = HookEvent(event)
        if len(args) != event.arity:
            raise ValueError(
                f"{event.value} hooks take {event.arity} arguments, got {len(args)}"
            )

        # Iterate over a snapshot: a callback may register more hooks
        callbacks = list(self._callbacks[event])
        if not callbacks:
            return

        log.debug("Dispatching %s to %d callbacks", event.value, len(callbacks))
        for cb in callbacks:
            if not self._isolate_failures:
                cb(*args)
                continue
            try:
                cb(*args)
            except Exception:
                log.exception(
                    "Error in %s hook %s",
                    event.value,
                    getattr(cb, "__qualname__", cb),
                )

    def dump_state(self) -> str:
        """Return a formatted string of all registered hooks."""
        lines = [
            f"=== HookRegistry: {self.count()} callbacks ===",
            "",
        ]
        for ev, cbs in self._callbacks.items():
            lines.append(f"  {ev.value}:")
            for cb in cbs:
                lines.append(f"    {getattr(cb, '__qualname__', repr(cb))}")
        return "\n".join(lines)

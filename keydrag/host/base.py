"""
keydrag.host.base - What keydrag needs from a window manager.

keydrag does not own windows. It only asks the host for:

    - the current position of a window,
    - a move of a window to a new position,
    - a named placement strategy applied to a window ("centered"),
    - a keymap to bind chords into, and the currently active window.

Any object that provides these satisfies the Host protocol. The
PlacementRegistry here holds the strategies a host can apply; it ships
"centered" and hosts may register more.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from keydrag.core.errors import PlacementStrategyMissingError
from keydrag.core.keymap import Keymap
from keydrag.host.rect import Rect

log = logging.getLogger(__name__)


# Window handles are opaque to keydrag: whatever the host hands out
WindowHandle = Any


@runtime_checkable
class Host(Protocol):
    """Capability set consumed from the host window manager."""

    window_keymap: Keymap

    def window_position(self, window: WindowHandle) -> tuple[int, int]:
        """Current (x, y) of the window's top-left corner."""
        ...

    def move_window_to(self, window: WindowHandle, x: int, y: int) -> None:
        """Move the window so its top-left corner is at (x, y)."""
        ...

    def apply_placement(self, name: str, window: WindowHandle) -> None:
        """Position the window using the named placement strategy."""
        ...

    def active_window(self) -> WindowHandle | None:
        """The window interactive commands should act on, if any."""
        ...


# A strategy receives the window geometry and the work area that holds
# it and returns the new top-left corner.
PlacementFn = Callable[[Rect, Rect], tuple[int, int]]


def centered(window_rect: Rect, work_area: Rect) -> tuple[int, int]:
    """Place the window so its center matches the work area center."""
    return window_rect.centered_in(work_area)


class PlacementRegistry:
    """Named placement strategies available to a host."""

    def __init__(self) -> None:
        self._strategies: dict[str, PlacementFn] = {}
        self.register("centered", centered)

    @property
    def names(self) -> list[str]:
        return sorted(self._strategies)

    def register(self, name: str, fn: PlacementFn) -> None:
        """Add or replace a strategy."""
        if name in self._strategies:
            log.info("Placement strategy replaced: %s", name)
        self._strategies[name] = fn

    def unregister(self, name: str) -> bool:
        """Remove a strategy. Returns True if it existed."""
        return self._strategies.pop(name, None) is not None

    def get(self, name: str) -> PlacementFn:
        """
        Look up a strategy by name.

        Raises:
            PlacementStrategyMissingError: If *name* is not registered.
        """
        fn = self._strategies.get(name)
        if fn is None:
            raise PlacementStrategyMissingError(name)
        return fn

    def place(self, name: str, window_rect: Rect, work_area: Rect) -> tuple[int, int]:
        """Compute the target position for *window_rect* with strategy *name*."""
        return self.get(name)(window_rect, work_area)

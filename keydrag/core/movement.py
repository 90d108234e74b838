"""
keydrag.core.movement - Move and center executors.

Each invocation is a self-contained synchronous transaction:

    resolve steps -> before hooks -> host call(s) -> after hooks

If the host call or a before hook raises, the exception propagates and
the after hooks do not run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from keydrag.core.direction import Direction, SpeedMode
from keydrag.core.hooks import HookEvent, HookRegistry
from keydrag.core.steps import StepConfig, effective_steps

if TYPE_CHECKING:
    from keydrag.host.base import Host, WindowHandle

log = logging.getLogger(__name__)


# Returns the persistent step configuration at the time of the call
StepSource = Callable[[], StepConfig]


class MovementExecutor:
    """
    Moves a window by one step in a direction.

    The step magnitudes are resolved once per call: the persistent
    configuration for SpeedMode.NORMAL, a fixed 1x1 step for
    SpeedMode.SLOW. The persistent configuration is only read, never
    written.
    """

    def __init__(self, host: Host, hooks: HookRegistry, steps: StepSource) -> None:
        self._host = host
        self._hooks = hooks
        self._steps = steps

    def move(
        self,
        window: WindowHandle,
        h: int,
        v: int,
        speed: SpeedMode = SpeedMode.NORMAL,
    ) -> None:
        """
        Move *window* one step in direction (h, v).

        Args:
            window: Host window handle. Validity is checked by the host.
            h:      -1 left, 0 none, 1 right.
            v:      -1 up, 0 none, 1 down.
            speed:  NORMAL uses the configured steps, SLOW moves 1 pixel.

        Raises:
            ValueError:         If (h, v) is not one of the 8 directions.
            InvalidWindowError: If the host rejects the window.
            Exception:          Whatever a hook callback raises.
        """
        # Validates the multipliers before any hook runs
        direction = Direction(h, v)
        steps = effective_steps(self._steps(), speed)
        self.move_by(window, direction, steps)

    def move_by(self, window: WindowHandle, direction: Direction, steps: StepConfig) -> None:
        """Move *window* in *direction* using explicit step magnitudes."""
        h, v = direction.h, direction.v

        self._hooks.dispatch(HookEvent.BEFORE_MOVE, (window, h, v))

        x, y = self._host.window_position(window)
        dx, dy = steps.offset(h, v)
        self._host.move_window_to(window, x + dx, y + dy)
        log.debug(
            "move %s: %s (%d,%d) -> (%d,%d) step=%s",
            direction, window, x, y, x + dx, y + dy, steps,
        )

        self._hooks.dispatch(HookEvent.AFTER_MOVE, (window, h, v))


class CenterExecutor:
    """Moves a window to the display center via the host placement strategy."""

    # Host placement strategy used for centering
    STRATEGY = "centered"

    def __init__(self, host: Host, hooks: HookRegistry) -> None:
        self._host = host
        self._hooks = hooks

    def center(self, window: WindowHandle) -> None:
        """
        Center *window* on its display.

        Raises:
            PlacementStrategyMissingError: If the host has no "centered" strategy.
            InvalidWindowError:            If the host rejects the window.
        """
        self._hooks.dispatch(HookEvent.BEFORE_CENTER, (window,))
        self._host.apply_placement(self.STRATEGY, window)
        log.debug("center: %s", window)
        self._hooks.dispatch(HookEvent.AFTER_CENTER, (window,))

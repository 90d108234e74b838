"""
keydrag.extension - Keydrag: the extension as the host sees it.

Wires the pieces together around one host:

    settings  -> MovementExecutor (steps read per call)
    hooks     -> MovementExecutor, CenterExecutor
    executors -> CommandCatalog (17 commands)
    catalog   -> keypad bindings in a keymap

Usage:
    kd = Keydrag(host)
    kd.hooks.register(HookEvent.AFTER_MOVE, follow_with_pointer)
    kd.install_keypad_bindings()
"""

from __future__ import annotations

import logging
from typing import Any

from keydrag.config.keypad import install_keypad_bindings
from keydrag.config.settings import KeydragSettings
from keydrag.core.commands import CommandCatalog, build_keydrag_commands
from keydrag.core.direction import SpeedMode
from keydrag.core.hooks import HookCallback, HookEvent, HookRegistry
from keydrag.core.keymap import Keymap
from keydrag.core.movement import CenterExecutor, MovementExecutor
from keydrag.host.base import Host

log = logging.getLogger(__name__)


class Keydrag:
    """
    Keyboard window dragging on top of a host window manager.

    All state that outlives a single command lives here: the settings,
    the hook lists and the command catalog.
    """

    def __init__(
        self,
        host: Host,
        settings: KeydragSettings | None = None,
        hooks: HookRegistry | None = None,
    ) -> None:
        self.host = host
        self.settings = settings if settings is not None else KeydragSettings()
        self.hooks = hooks if hooks is not None else HookRegistry()

        self.mover = MovementExecutor(host, self.hooks, self.settings.steps)
        self.centerer = CenterExecutor(host, self.hooks)

        self.catalog = CommandCatalog()
        build_keydrag_commands(self.catalog, self.mover, self.centerer)

    # ------------------------------------------------------------------
    # Public: operations
    # ------------------------------------------------------------------
    def move(self, window: Any, h: int, v: int, speed: SpeedMode = SpeedMode.NORMAL) -> None:
        self.mover.move(window, h, v, speed)

    def center(self, window: Any) -> None:
        self.centerer.center(window)

    def run(self, name: str, window: Any | None = None) -> bool:
        """
        Run a command by name, on *window* or on the host's active window.

        Returns:
            False if the command is unknown or there is no window to act on.
        """
        if window is None:
            window = self.host.active_window()
            if window is None:
                log.debug("run %s: no active window", name)
                return False
        return self.catalog.execute(name, window)

    def add_hook(self, event: HookEvent | str, callback: HookCallback) -> None:
        self.hooks.register(event, callback)

    def install_keypad_bindings(
        self,
        keymap: Keymap | None = None,
        prefix: str | None = None,
        slow_prefix: str | None = None,
    ) -> int:
        """
        Bind the commands to keypad keys.

        Args:
            keymap:      Keymap to bind in; the host's window keymap if None.
            prefix:      Normal-speed prefix; the "prefix" setting if None.
            slow_prefix: Slow prefix; the "slow-prefix" setting if None.

        Returns:
            Number of chords bound.
        """
        return install_keypad_bindings(
            self.catalog,
            keymap if keymap is not None else self.host.window_keymap,
            prefix or self.settings.prefix,
            slow_prefix or self.settings.slow_prefix,
        )

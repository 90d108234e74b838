"""
keydrag.host.win32host - Win32Host: keydrag on plain Windows.

Window handles are HWND integers. The host:

  1. Reads and sets window positions with GetWindowRect / SetWindowPos.
  2. Applies placement strategies inside the work area of the monitor
     that holds the window.
  3. On run(), registers every chord of its window keymap as a global
     hotkey and enters the Win32 message loop. Each WM_HOTKEY runs the
     bound command on the current foreground window.
"""

from __future__ import annotations

import logging
import signal
from typing import Optional

from keydrag.core.commands import Command
from keydrag.core.errors import ChordParseError, InvalidWindowError
from keydrag.core.keymap import Keymap
from keydrag.host import win32
from keydrag.host.base import PlacementRegistry
from keydrag.host.hotkeys import HotkeyManager
from keydrag.host.monitor import work_area_for_window
from keydrag.host.rect import Rect

log = logging.getLogger(__name__)


class Win32Host:
    """
    Host implementation backed by user32.

    Usage:
        host = Win32Host()
        kd = Keydrag(host)
        kd.install_keypad_bindings()
        host.run()   # blocks in the Win32 message loop
    """

    def __init__(
        self,
        placements: Optional[PlacementRegistry] = None,
        window_keymap: Optional[Keymap] = None,
    ) -> None:
        self.placements = placements if placements is not None else PlacementRegistry()
        self.window_keymap = window_keymap if window_keymap is not None else Keymap("window-keymap")
        self._hotkeys = HotkeyManager()
        self._running: bool = False
        self._loop_thread_id: int = 0

    # ------------------------------------------------------------------
    # Host protocol
    # ------------------------------------------------------------------
    def _rect(self, hwnd: int) -> Rect:
        rect = win32.window_rect(hwnd)
        if rect is None:
            raise InvalidWindowError(hwnd, "GetWindowRect")
        return rect

    def window_position(self, window: int) -> tuple[int, int]:
        rect = self._rect(window)
        return (rect.x, rect.y)

    def move_window_to(self, window: int, x: int, y: int) -> None:
        if not win32.move_window(window, x, y):
            raise InvalidWindowError(window, "SetWindowPos")

    def apply_placement(self, name: str, window: int) -> None:
        strategy = self.placements.get(name)
        rect = self._rect(window)
        x, y = strategy(rect, work_area_for_window(window))
        self.move_window_to(window, x, y)

    def active_window(self) -> Optional[int]:
        hwnd = win32.foreground_window()
        return hwnd or None

    # ------------------------------------------------------------------
    # Hotkeys
    # ------------------------------------------------------------------
    def _invoke(self, command: Command) -> None:
        window = self.active_window()
        if window is None:
            log.debug("%s: no foreground window", command.name)
            return
        command(window)

    def register_keymap(self) -> int:
        """Register each chord of the window keymap as a global hotkey."""
        registered = 0
        for chord, command in self.window_keymap.bindings.items():
            def _callback(cmd: Command = command) -> None:
                self._invoke(cmd)

            try:
                if self._hotkeys.register(chord, _callback, command.name):
                    registered += 1
            except ChordParseError:
                log.warning("Chord %s has no Win32 hotkey, skipping", chord)
        return registered

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self) -> None:
        """
        Register hotkeys and enter the Win32 message loop.

        Blocks until stop() is called or a SIGINT/SIGTERM is received.
        """
        count = self.register_keymap()
        log.info("Hotkeys registered: %d", count)

        def _signal_handler(sig: int, frame: object) -> None:
            log.info("Signal %d received, stopping...", sig)
            self.stop()

        signal.signal(signal.SIGINT, _signal_handler)
        signal.signal(signal.SIGTERM, _signal_handler)

        self._running = True
        self._loop_thread_id = win32.current_thread_id()
        log.info("Entering message loop")

        try:
            while self._running:
                msg = win32.wait_message()
                if msg is None:
                    break

                if msg.message == win32.WM_HOTKEY:
                    self._hotkeys.dispatch(msg.wParam)
                    continue

                win32.forward_message(msg)
        finally:
            self._hotkeys.unregister_all()
            log.info("Message loop stopped")

    def stop(self) -> None:
        """
        Request the event loop to stop.
        Safe to call from any thread or from within a callback.
        """
        self._running = False
        win32.quit_loop(self._loop_thread_id or None)

    def dump_state(self) -> str:
        return self._hotkeys.dump_state()

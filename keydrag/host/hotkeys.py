"""
keydrag.host.hotkeys - Chords del keymap como hotkeys globales.

Cada Chord se traduce a (modifiers, vk) y se registra con RegisterHotKey.
El message loop del Win32Host recibe WM_HOTKEY con el id del hotkey y
lo pasa a HotkeyManager.dispatch().
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from keydrag.core.errors import ChordParseError
from keydrag.core.keymap import Chord
from keydrag.host import win32

log = logging.getLogger(__name__)


HotkeyCallback = Callable[[], None]


_MODIFIER_FLAGS: dict[str, int] = {
    "C": win32.MOD_CONTROL,
    "A": win32.MOD_ALT,
    "S": win32.MOD_SHIFT,
    "W": win32.MOD_WIN,
}

# Chord key name -> virtual key code, for keys outside the generated ranges
_NAMED_VK: dict[str, int] = {
    "BackSpace": 0x08, "Tab": 0x09, "Return": 0x0D, "KP_Enter": 0x0D,
    "Escape": 0x1B, "Space": 0x20, "Prior": 0x21, "Next": 0x22,
    "End": 0x23, "Home": 0x24, "Left": 0x25, "Up": 0x26,
    "Right": 0x27, "Down": 0x28, "Insert": 0x2D, "Delete": 0x2E,
    "KP_Multiply": 0x6A, "KP_Add": 0x6B, "KP_Subtract": 0x6D,
    "KP_Decimal": 0x6E, "KP_Divide": 0x6F,
}

# First code of each contiguous range: "0".."9", "a".."z", KP_0..KP_9, F1..F24
_VK_DIGIT0, _VK_A, _VK_NUMPAD0, _VK_F1 = 0x30, 0x41, 0x60, 0x70


def chord_to_hotkey(chord: Chord) -> tuple[int, int]:
    """
    (modifiers, vk) that RegisterHotKey needs for *chord*.

    Raises:
        ChordParseError: If the key has no Win32 virtual key code.
    """
    modifiers = 0
    for mod in chord.modifiers:
        modifiers |= _MODIFIER_FLAGS[mod]

    key = chord.key
    if key in _NAMED_VK:
        return modifiers, _NAMED_VK[key]
    if key.startswith("KP_") and key[3:].isdigit():
        return modifiers, _VK_NUMPAD0 + int(key[3:])
    if key.startswith("F") and key[1:].isdigit():
        return modifiers, _VK_F1 + int(key[1:]) - 1
    if len(key) == 1 and key.isdigit():
        return modifiers, _VK_DIGIT0 + int(key)
    if len(key) == 1 and key.isalpha():
        return modifiers, _VK_A + (ord(key) - ord("a"))
    raise ChordParseError(f"No virtual key for {key!r} in chord {chord}")


@dataclass(frozen=True, slots=True)
class Hotkey:
    """A chord registered with the system, and what it runs."""

    id: int
    chord: Chord
    label: str
    callback: HotkeyCallback


class HotkeyManager:
    """
    Hotkeys globales indexados por chord.

    Un chord se registra una sola vez; registrarlo de nuevo reemplaza
    el callback sin volver a llamar a RegisterHotKey.
    """

    def __init__(self) -> None:
        self._by_id: dict[int, Hotkey] = {}
        self._by_chord: dict[Chord, int] = {}
        self._next_id = 1

    @property
    def count(self) -> int:
        return len(self._by_id)

    def register(self, chord: Chord, callback: HotkeyCallback, label: str = "") -> bool:
        """
        Make *chord* a global hotkey that runs *callback*.

        Returns:
            False if the system refused the chord (usually because another
            program already owns it).

        Raises:
            ChordParseError: If the chord's key has no virtual key code.
        """
        existing = self._by_chord.get(chord)
        if existing is not None:
            self._by_id[existing] = Hotkey(existing, chord, label, callback)
            log.debug("Hotkey %s now runs %s", chord, label)
            return True

        modifiers, vk = chord_to_hotkey(chord)
        hotkey_id = self._next_id
        if not win32.register_hotkey(hotkey_id, modifiers | win32.MOD_NOREPEAT, vk):
            log.error("Hotkey %s (%s) could not be registered", chord, label)
            return False

        self._next_id += 1
        self._by_id[hotkey_id] = Hotkey(hotkey_id, chord, label, callback)
        self._by_chord[chord] = hotkey_id
        log.info("Hotkey %s -> %s", chord, label)
        return True

    def unregister_all(self) -> None:
        for hotkey_id in self._by_id:
            win32.unregister_hotkey(hotkey_id)
        log.info("Hotkeys released: %d", len(self._by_id))
        self._by_id.clear()
        self._by_chord.clear()

    def dispatch(self, hotkey_id: int) -> bool:
        """
        Run the callback behind a WM_HOTKEY id.

        A failing callback is logged; the message loop keeps running.

        Returns:
            True if the id belongs to a registered chord.
        """
        hotkey = self._by_id.get(hotkey_id)
        if hotkey is None:
            log.warning("WM_HOTKEY for unknown id %d", hotkey_id)
            return False

        log.debug("Hotkey %s pressed", hotkey.chord)
        try:
            hotkey.callback()
        except Exception:
            log.exception("Hotkey %s (%s) failed", hotkey.chord, hotkey.label)
        return True

    def dump_state(self) -> str:
        lines = [f"=== Hotkeys: {len(self._by_id)} ===", ""]
        for hk in self._by_id.values():
            lines.append(f"  {str(hk.chord):<12s} {hk.label}")
        return "\n".join(lines)

"""
keydrag.core.keymap - Keymaps y parser de chords de teclado.

Convierte strings como "C-A-KP_7" en un Chord canonico y mantiene la
tabla chord -> comando de un keymap.

Formato de un chord:
    <mod>-<mod>-...-<key>

    Modificadores: C (control), A (alt), M (meta, alias de alt),
                   S (shift), W (super).
    Teclas:        letras, digitos, F1..F24, KP_0..KP_9 y teclas con
                   nombre (Return, Space, Left, ...).

Caracteristicas:
    - Forma canonica: "A-C-KP_7" y "C-A-KP_7" son el mismo chord.
    - La ultima parte siempre es la tecla: "C-A" es control + tecla "a".
    - Validacion: error claro si el chord es invalido.
    - Semantica del keymap: bind() sobre un chord ya usado reemplaza el
      binding anterior (gana el ultimo registrado).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from keydrag.core.errors import ChordParseError

if TYPE_CHECKING:
    from keydrag.core.commands import Command

log = logging.getLogger(__name__)


# ============================================================================
# Modifier aliases -> canonical modifier
# ============================================================================
_MODIFIER_MAP: dict[str, str] = {
    "C": "C",
    "A": "A",
    "M": "A",
    "S": "S",
    "W": "W",
}

# Orden en que se escriben los modificadores en la forma canonica
_MODIFIER_ORDER: tuple[str, ...] = ("W", "C", "A", "S")


# ============================================================================
# Key name (lowercase) -> canonical key name
# ============================================================================
_KEY_MAP: dict[str, str] = {}


def _build_key_map() -> None:
    """Populate the key name map on first use."""
    if _KEY_MAP:
        return

    # Letters a-z
    for i in range(26):
        ch = chr(ord("a") + i)
        _KEY_MAP[ch] = ch

    # Digits 0-9
    for i in range(10):
        _KEY_MAP[str(i)] = str(i)

    # Function keys F1-F24
    for i in range(1, 25):
        _KEY_MAP[f"f{i}"] = f"F{i}"

    # Numpad
    for i in range(10):
        _KEY_MAP[f"kp_{i}"] = f"KP_{i}"

    for name in (
        "KP_Enter", "KP_Add", "KP_Subtract", "KP_Multiply", "KP_Divide",
        "KP_Decimal", "Return", "Escape", "Space", "Tab", "BackSpace",
        "Delete", "Insert", "Home", "End", "Prior", "Next",
        "Left", "Up", "Right", "Down",
    ):
        _KEY_MAP[name.lower()] = name

    # Aliases
    _KEY_MAP.update(
        {
            "enter": "Return",
            "esc": "Escape",
            "pageup": "Prior",
            "pagedown": "Next",
        }
    )


# ============================================================================
# Chord
# ============================================================================
@dataclass(frozen=True, slots=True)
class Chord:
    """A canonical key chord: a set of modifiers plus one key."""

    modifiers: frozenset[str]
    key: str

    def __str__(self) -> str:
        mods = [m for m in _MODIFIER_ORDER if m in self.modifiers]
        return "-".join([*mods, self.key])


def parse_chord(chord: str | Chord) -> Chord:
    """
    Parse a chord string into a canonical Chord.

    Args:
        chord: Chord like "A-KP_8", "C-A-KP_3" or "W-Return".

    Returns:
        The canonical Chord.

    Raises:
        ChordParseError: If the chord is empty, has no key part, contains
                         unknown tokens, or repeats a modifier.
    """
    if isinstance(chord, Chord):
        return chord

    _build_key_map()

    if not chord or not chord.strip():
        raise ChordParseError("Empty chord string")

    parts = chord.strip().split("-")
    if any(not p for p in parts):
        raise ChordParseError(f"Empty part in chord: {chord!r}")

    *mod_parts, key_part = parts

    modifiers: set[str] = set()
    for part in mod_parts:
        canonical = _MODIFIER_MAP.get(part)
        if canonical is None:
            raise ChordParseError(f"Unknown modifier {part!r} in chord: {chord!r}")
        if canonical in modifiers:
            raise ChordParseError(f"Duplicate modifier {part!r} in chord: {chord!r}")
        modifiers.add(canonical)

    key = _KEY_MAP.get(key_part.lower())
    if key is None:
        raise ChordParseError(f"Unknown key {key_part!r} in chord: {chord!r}")

    return Chord(frozenset(modifiers), key)


def is_valid_chord(chord: str) -> bool:
    """Check if a chord string is valid without raising."""
    try:
        parse_chord(chord)
        return True
    except ChordParseError:
        return False


# ============================================================================
# Keymap
# ============================================================================
class Keymap:
    """
    Tabla chord -> comando.

    Un chord tiene como maximo un binding. Registrar otro comando en el
    mismo chord reemplaza el anterior.
    """

    def __init__(self, name: str = "keymap") -> None:
        self.name = name
        self._bindings: dict[Chord, Command] = {}

    @property
    def count(self) -> int:
        return len(self._bindings)

    @property
    def bindings(self) -> dict[Chord, Command]:
        """Copy of the chord -> command table, in binding order."""
        return dict(self._bindings)

    def bind(self, chord: str | Chord, command: Command) -> Chord:
        """
        Bind *chord* to *command*.

        Returns:
            The canonical chord that was bound.
        """
        parsed = parse_chord(chord)
        previous = self._bindings.get(parsed)
        if previous is not None and previous is not command:
            log.info(
                "%s: %s rebound %s -> %s",
                self.name, parsed, previous.name, command.name,
            )
        # Pop first so a rebind moves the chord to the end of the table
        self._bindings.pop(parsed, None)
        self._bindings[parsed] = command
        log.debug("%s: bound %s -> %s", self.name, parsed, command.name)
        return parsed

    def lookup(self, chord: str | Chord) -> Command | None:
        """The command bound to *chord*, or None."""
        return self._bindings.get(parse_chord(chord))

    def dump_state(self) -> str:
        """Return a formatted string of all bindings."""
        lines = [
            f"=== Keymap {self.name}: {len(self._bindings)} bindings ===",
            "",
        ]
        for chord, cmd in self._bindings.items():
            lines.append(f"  {str(chord):<12s} {cmd.name}")
        return "\n".join(lines)

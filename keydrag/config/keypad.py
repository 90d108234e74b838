"""
keydrag.config.keypad - Bindings del teclado numerico.

Vincula los comandos de keydrag a las teclas del keypad:

    Prefijo normal (default "A", alt):
        <prefix>-KP_7  upleft     <prefix>-KP_8  up      <prefix>-KP_9  upright
        <prefix>-KP_4  left       <prefix>-KP_5  center  <prefix>-KP_6  right
        <prefix>-KP_1  downleft   <prefix>-KP_2  down    <prefix>-KP_3  downright

    Prefijo lento (default "C-A", control-alt):
        <slow-prefix>-KP_<n>  la variante "-slowly" de cada direccion.
        No existe center lento: KP_5 solo se vincula con el prefijo normal.

Instalar varias veces con prefijos distintos agrega bindings; nunca
elimina los anteriores. Si dos instalaciones usan el mismo chord, el
keymap se queda con el ultimo. Un prefijo invalido se rechaza antes de
vincular nada.
"""

from __future__ import annotations

import logging

from keydrag.core.commands import CENTER_COMMAND, SLOW_SUFFIX, CommandCatalog
from keydrag.core.direction import KEYPAD_CENTER, KEYPAD_LAYOUT
from keydrag.core.keymap import Chord, Keymap, parse_chord

log = logging.getLogger(__name__)


DEFAULT_PREFIX = "A"
DEFAULT_SLOW_PREFIX = "C-A"


def keypad_chord(prefix: str, digit: str) -> str:
    """Chord string for keypad *digit* under *prefix*, e.g. "C-A-KP_7"."""
    return f"{prefix}-KP_{digit}"


def check_prefix(prefix: str) -> str:
    """
    Check that *prefix* forms a valid chord with a keypad key.

    Raises:
        ChordParseError: If the prefix is empty or holds an unknown or
                         repeated modifier.
    """
    parse_chord(keypad_chord(prefix, KEYPAD_CENTER))
    return prefix


def keypad_plan(prefix: str, slow_prefix: str) -> list[tuple[Chord, str]]:
    """
    Every (chord, command name) pair an install binds, already parsed.

    Raises:
        ChordParseError: If either prefix is invalid.
    """
    plan: list[tuple[Chord, str]] = []

    # ------------------------------------------------------------------
    # Direcciones: normal y lenta por cada tecla
    # ------------------------------------------------------------------
    for digit, direction in KEYPAD_LAYOUT.items():
        plan.append((parse_chord(keypad_chord(prefix, digit)), direction))
        plan.append((parse_chord(keypad_chord(slow_prefix, digit)), direction + SLOW_SUFFIX))

    # ------------------------------------------------------------------
    # Center: solo con el prefijo normal
    # ------------------------------------------------------------------
    plan.append((parse_chord(keypad_chord(prefix, KEYPAD_CENTER)), CENTER_COMMAND))
    return plan


def install_keypad_bindings(
    catalog: CommandCatalog,
    keymap: Keymap,
    prefix: str | None = None,
    slow_prefix: str | None = None,
) -> int:
    """
    Bind the keydrag commands to numeric keypad keys in *keymap*.

    Both prefixes are parsed before anything is bound, so an invalid
    prefix leaves *keymap* untouched.

    Args:
        catalog:     Catalog holding the generated keydrag commands.
        keymap:      The keymap to bind in.
        prefix:      Prefix for normal-speed bindings; "A" if None.
        slow_prefix: Prefix for slow bindings; "C-A" if None.

    Returns:
        Number of chords bound (17 when every command is present).

    Raises:
        ChordParseError: If either prefix is invalid.
    """
    prefix = prefix or DEFAULT_PREFIX
    slow_prefix = slow_prefix or DEFAULT_SLOW_PREFIX
    plan = keypad_plan(prefix, slow_prefix)

    registered = 0
    for chord, command in plan:
        cmd = catalog.get(command)
        if cmd is None:
            log.warning("Keypad bind: command %r not found, skipping", command)
            continue
        keymap.bind(chord, cmd)
        registered += 1

    log.info(
        "Keypad bindings installed in %s: %d (prefix=%s, slow-prefix=%s)",
        keymap.name, registered, prefix, slow_prefix,
    )
    return registered

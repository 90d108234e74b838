"""
keydrag.core.commands - Catalogo de comandos de keydrag.

Genera, una sola vez al arrancar, los comandos invocables por nombre:

    - 8 direcciones x 2 velocidades = 16 comandos de movimiento
      ("up", "upleft", ..., "downright-slowly")
    - 1 comando "center" (sin variante lenta)

Cada comando recibe un unico argumento: la ventana sobre la que actua.
El host resuelve "la ventana activa" y la pasa como argumento normal.

El CommandCatalog es el registro central:
    catalog = CommandCatalog()
    build_keydrag_commands(catalog, mover, centerer)
    catalog.execute("upright-slowly", window)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from keydrag.core.direction import DIRECTIONS, Direction, SpeedMode

if TYPE_CHECKING:
    from keydrag.core.movement import CenterExecutor, MovementExecutor

log = logging.getLogger(__name__)


# Host namespace prefix: "keydrag-upleft" resolves to "upleft"
COMMAND_PREFIX = "keydrag-"

# Suffix of the slow variant of a movement command
SLOW_SUFFIX = "-slowly"

CENTER_COMMAND = "center"

# Type for command functions: called with the target window
CommandFn = Callable[[Any], None]


@dataclass(frozen=True, slots=True)
class Command:
    """
    Metadata for a registered command.

    direction and speed are None for commands that do not move by a step
    (center).
    """

    name: str
    fn: CommandFn
    description: str
    category: str
    direction: Optional[Direction] = None
    speed: Optional[SpeedMode] = None

    @property
    def qualified_name(self) -> str:
        return COMMAND_PREFIX + self.name

    def __call__(self, window: Any) -> None:
        self.fn(window)


def movement_command_name(direction: Direction, speed: SpeedMode) -> str:
    """Name of the movement command for *direction* at *speed*."""
    suffix = SLOW_SUFFIX if speed is SpeedMode.SLOW else ""
    return direction.name + suffix


def movement_description(direction: Direction, speed: SpeedMode) -> str:
    verb = "Slowly move" if speed is SpeedMode.SLOW else "Move"
    return f"{verb} the current window {direction.phrase}."


class CommandCatalog:
    """
    Registry that maps command names to callables taking a window.

    Lookups accept the bare name ("upleft") or the host-qualified name
    ("keydrag-upleft").
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    @property
    def count(self) -> int:
        return len(self._commands)

    @property
    def command_names(self) -> list[str]:
        """All registered command names, sorted."""
        return sorted(self._commands.keys())

    def register(self, command: Command) -> Command:
        """
        Register a command under its name.

        If a command with the same name already exists, it is replaced,
        so regenerating the catalog leaves it unchanged.
        """
        if command.name in self._commands:
            log.info("Command replaced: %s", command.name)

        self._commands[command.name] = command
        log.debug("Command registered: %s (%s)", command.name, command.category)
        return command

    def get(self, name: str) -> Command | None:
        """Look up a command by bare or qualified name."""
        if name.startswith(COMMAND_PREFIX):
            name = name[len(COMMAND_PREFIX):]
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def require(self, name: str) -> Command:
        """Like get(), but raise KeyError for unknown names."""
        cmd = self.get(name)
        if cmd is None:
            raise KeyError(f"Unknown command: {name}")
        return cmd

    def execute(self, name: str, window: Any) -> bool:
        """
        Execute a command by name on *window*.

        Failures inside the command (host errors, hook errors) are not
        caught here; they propagate to the caller.

        Returns:
            True if the command was found and ran, False if unknown.
        """
        cmd = self.get(name)
        if cmd is None:
            log.warning("Unknown command: %s", name)
            return False

        log.debug("Executing command: %s on %s", cmd.name, window)
        cmd.fn(window)
        return True

    def list_commands(self, category: str | None = None) -> list[Command]:
        """
        List all registered commands, optionally filtered by category.

        Returns:
            Sorted list of Command objects.
        """
        commands = list(self._commands.values())
        if category is not None:
            commands = [c for c in commands if c.category == category]
        return sorted(commands, key=lambda c: c.name)

    def __iter__(self):
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def dump_state(self) -> str:
        """Return a formatted string of all commands for debugging."""
        lines = [
            f"=== CommandCatalog: {len(self._commands)} commands ===",
            "",
        ]
        for cmd in self.list_commands():
            lines.append(f"  [{cmd.category}] {cmd.name}  {cmd.description}")
        return "\n".join(lines)


def build_keydrag_commands(
    catalog: CommandCatalog,
    mover: MovementExecutor,
    centerer: CenterExecutor,
) -> None:
    """
    Register the 16 movement commands and the center command.

    Calling it again on the same catalog replaces each command with an
    equivalent one; the catalog still holds 17 entries.

    Args:
        catalog:  The CommandCatalog to populate.
        mover:    Executor used by every movement command.
        centerer: Executor used by the center command.
    """

    # -- Movement commands ---------------------------------------------
    def _make_move(direction: Direction, speed: SpeedMode) -> CommandFn:
        def _move(window: Any) -> None:
            mover.move(window, direction.h, direction.v, speed)
        return _move

    for _dir in DIRECTIONS:
        for _speed in (SpeedMode.NORMAL, SpeedMode.SLOW):
            catalog.register(
                Command(
                    name=movement_command_name(_dir, _speed),
                    fn=_make_move(_dir, _speed),
                    description=movement_description(_dir, _speed),
                    category="move-slowly" if _speed is SpeedMode.SLOW else "move",
                    direction=_dir,
                    speed=_speed,
                )
            )

    # -- Center (no slow variant) --------------------------------------
    catalog.register(
        Command(
            name=CENTER_COMMAND,
            fn=centerer.center,
            description="Move the current window to the center of the display.",
            category="center",
        )
    )

    log.info("Keydrag commands registered: %d", catalog.count)

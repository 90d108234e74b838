"""
keydrag.core.errors - Excepciones del nucleo de keydrag.

Los errores del host (ventana invalida, estrategia de colocacion
desconocida) se definen aqui para que cualquier implementacion de host
los lance con el mismo tipo. El nucleo nunca los captura: se propagan
al que disparo el comando.
"""

from __future__ import annotations


class KeydragError(Exception):
    """Base class for every error raised by keydrag."""


class InvalidWindowError(KeydragError):
    """The window handle passed to the host is no longer valid."""

    def __init__(self, window: object, action: str = "") -> None:
        self.window = window
        self.action = action
        detail = f" ({action})" if action else ""
        super().__init__(f"Invalid window: {window!r}{detail}")


class PlacementStrategyMissingError(KeydragError):
    """The host does not know the requested placement strategy."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown placement strategy: {name!r}")


class ChordParseError(KeydragError, ValueError):
    """Raised when a key chord string cannot be parsed."""


class SettingError(KeydragError, ValueError):
    """Raised when a setting is unknown or gets an invalid value."""

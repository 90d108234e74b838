"""
keydrag.core.direction - Direcciones y velocidades de movimiento.

Una Direction es un par (h, v) con cada componente en {-1, 0, 1}:
    h = -1 izquierda, +1 derecha
    v = -1 arriba,    +1 abajo

El par (0, 0) no es una direccion y no se puede construir. Existen
exactamente 8 direcciones validas (4 cardinales y 4 diagonales), en
DIRECTIONS, en el orden en que se generan los comandos.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SpeedMode(enum.Enum):
    """How far a single movement command steps."""
    NORMAL = "normal"
    SLOW = "slow"


# Tokens used to build command names (vertical first, then horizontal)
_V_TOKENS: dict[int, str] = {-1: "up", 1: "down", 0: ""}
_H_TOKENS: dict[int, str] = {-1: "left", 1: "right", 0: ""}


@dataclass(frozen=True, slots=True)
class Direction:
    """
    Unit compass direction.

    The sign of each movement comes only from these two components;
    the magnitude is applied separately from a StepConfig.
    """

    h: int
    v: int

    def __post_init__(self) -> None:
        for axis, value in (("h", self.h), ("v", self.v)):
            if isinstance(value, bool) or value not in (-1, 0, 1):
                raise ValueError(
                    f"Direction component {axis} must be -1, 0 or 1, got {value!r}"
                )
        if self.h == 0 and self.v == 0:
            raise ValueError("Direction (0, 0) does not move anywhere")

    @property
    def vertical(self) -> str:
        return _V_TOKENS[self.v]

    @property
    def horizontal(self) -> str:
        return _H_TOKENS[self.h]

    @property
    def name(self) -> str:
        """Command token: vertical then horizontal, e.g. "upright"."""
        return self.vertical + self.horizontal

    @property
    def phrase(self) -> str:
        """Human phrase used in descriptions, e.g. "up and to the left"."""
        if self.vertical and self.horizontal:
            return f"{self.vertical} and to the {self.horizontal}"
        return self.vertical or self.horizontal

    @property
    def opposite(self) -> Direction:
        return Direction(-self.h, -self.v)

    def __str__(self) -> str:
        return self.name


def _enumerate_directions() -> tuple[Direction, ...]:
    """Cross product of vertical {up, down, none} x horizontal {left, right, none}."""
    result: list[Direction] = []
    for v in (-1, 1, 0):
        for h in (-1, 1, 0):
            if v == 0 and h == 0:
                continue
            result.append(Direction(h, v))
    return tuple(result)


DIRECTIONS: tuple[Direction, ...] = _enumerate_directions()


# Numeric keypad layout: digit -> direction token
#   7 8 9
#   4 5 6     (5 is center, bound separately)
#   1 2 3
KEYPAD_LAYOUT: dict[str, str] = {
    "7": "upleft",
    "8": "up",
    "9": "upright",
    "4": "left",
    "6": "right",
    "1": "downleft",
    "2": "down",
    "3": "downright",
}

KEYPAD_CENTER = "5"

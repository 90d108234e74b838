"""Shared pytest fixtures and a fake host for keydrag tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from keydrag.config.settings import KeydragSettings
from keydrag.core.errors import InvalidWindowError
from keydrag.core.keymap import Keymap
from keydrag.extension import Keydrag
from keydrag.host.base import PlacementRegistry
from keydrag.host.rect import Rect


@dataclass
class FakeWindow:
    """In-memory window with a position and a size."""

    name: str
    x: int = 0
    y: int = 0
    w: int = 200
    h: int = 100
    valid: bool = True

    def __hash__(self) -> int:
        return id(self)


@dataclass
class FakeHost:
    """Host that records every call it gets."""

    work_area: Rect = Rect(0, 0, 1000, 800)
    placements: PlacementRegistry = field(default_factory=PlacementRegistry)
    window_keymap: Keymap = field(default_factory=lambda: Keymap("window-keymap"))
    active: FakeWindow | None = None
    fail_moves: bool = False
    calls: list[tuple] = field(default_factory=list)

    def window_position(self, window: FakeWindow) -> tuple[int, int]:
        self.calls.append(("position", window.name))
        if not window.valid:
            raise InvalidWindowError(window, "position")
        return (window.x, window.y)

    def move_window_to(self, window: FakeWindow, x: int, y: int) -> None:
        self.calls.append(("move", window.name, x, y))
        if not window.valid or self.fail_moves:
            raise InvalidWindowError(window, "move")
        window.x, window.y = x, y

    def apply_placement(self, name: str, window: FakeWindow) -> None:
        self.calls.append(("placement", name, window.name))
        strategy = self.placements.get(name)
        if not window.valid:
            raise InvalidWindowError(window, "placement")
        window.x, window.y = strategy(
            Rect(window.x, window.y, window.w, window.h), self.work_area
        )

    def active_window(self) -> FakeWindow | None:
        return self.active

    def count(self, kind: str) -> int:
        return sum(1 for c in self.calls if c[0] == kind)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def window() -> FakeWindow:
    """Window at (100, 100)."""
    return FakeWindow("editor", x=100, y=100)


@pytest.fixture
def settings() -> KeydragSettings:
    return KeydragSettings()


@pytest.fixture
def kd(host: FakeHost, settings: KeydragSettings) -> Keydrag:
    """Keydrag extension wired to the fake host."""
    return Keydrag(host, settings)


@pytest.fixture
def make_window():
    """Factory for extra windows: make_window("term", x=5, y=5)."""
    return FakeWindow

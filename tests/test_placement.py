"""Tests for Rect geometry and the placement registry."""

from __future__ import annotations

import pytest

from keydrag.core.errors import PlacementStrategyMissingError
from keydrag.host.base import Host, PlacementRegistry, centered
from keydrag.host.rect import Rect


def test_rect_ltrb_round_trip():
    rect = Rect.from_ltrb(10, 20, 110, 70)
    assert rect == Rect(10, 20, 100, 50)
    assert rect.to_ltrb() == (10, 20, 110, 70)
    assert (rect.right, rect.bottom) == (110, 70)


def test_centered_in_offset_work_area():
    # Work area below a 40px top bar on a second monitor
    work = Rect(1920, 40, 1920, 1040)
    assert centered(Rect(0, 0, 800, 600), work) == (1920 + 560, 40 + 220)


def test_centered_larger_than_area():
    assert centered(Rect(0, 0, 300, 300), Rect(0, 0, 100, 100)) == (-100, -100)


def test_registry_has_centered():
    registry = PlacementRegistry()
    assert registry.names == ["centered"]
    assert registry.place("centered", Rect(5, 5, 100, 100), Rect(0, 0, 300, 200)) == (100, 50)


def test_registry_custom_strategy():
    registry = PlacementRegistry()
    registry.register("top-left", lambda win, area: (area.x, area.y))
    assert registry.place("top-left", Rect(50, 50, 10, 10), Rect(7, 8, 100, 100)) == (7, 8)


def test_missing_strategy():
    registry = PlacementRegistry()
    with pytest.raises(PlacementStrategyMissingError) as exc:
        registry.get("cascade")
    assert exc.value.name == "cascade"


def test_fake_host_satisfies_protocol(host):
    assert isinstance(host, Host)

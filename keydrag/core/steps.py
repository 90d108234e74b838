"""
keydrag.core.steps - Step magnitudes for keyboard movement.

StepConfig is an immutable (horizontal, vertical) pair of pixel counts.
Normal-speed commands read the persistent configuration at invocation
time; slow commands use SLOW_STEPS instead. The value is passed into the
movement executor as an argument, so a slow move never touches the
persistent settings.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic.dataclasses import dataclass

from keydrag.core.direction import SpeedMode

# Default pixels per step on each axis
DEFAULT_STEP = 10

# Strict: None, bool, float and numeric strings are all rejected
StepSize = Annotated[int, Field(gt=0, strict=True)]


@dataclass(frozen=True)
class StepConfig:
    """Pixels moved per command on each axis."""

    horizontal: StepSize = DEFAULT_STEP
    vertical: StepSize = DEFAULT_STEP

    def with_horizontal(self, value: int) -> StepConfig:
        return StepConfig(value, self.vertical)

    def with_vertical(self, value: int) -> StepConfig:
        return StepConfig(self.horizontal, value)

    def offset(self, h: int, v: int) -> tuple[int, int]:
        """Pixel offset for a move with multipliers (h, v)."""
        return (h * self.horizontal, v * self.vertical)

    def __str__(self) -> str:
        return f"{self.horizontal}x{self.vertical}"


SLOW_STEPS = StepConfig(1, 1)


def effective_steps(configured: StepConfig, speed: SpeedMode) -> StepConfig:
    """Resolve the steps a single command uses for the given speed."""
    if speed is SpeedMode.SLOW:
        return SLOW_STEPS
    return configured

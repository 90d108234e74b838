"""
keydrag.core - Command generation and movement execution.

This package contains:
    - direction : Direction (h, v) and SpeedMode
    - steps : StepConfig and slow-step resolution
    - hooks : HookRegistry, the before/after move and center hook lists
    - movement : MovementExecutor and CenterExecutor
    - commands : CommandCatalog and the generated keydrag commands
    - keymap : Chord parsing and the Keymap binding table
    - errors : Exception hierarchy
"""

from keydrag.core.direction import DIRECTIONS, Direction, SpeedMode
from keydrag.core.hooks import HookEvent, HookRegistry
from keydrag.core.steps import SLOW_STEPS, StepConfig

__all__ = [
    "DIRECTIONS", "Direction", "SpeedMode",
    "HookEvent", "HookRegistry",
    "SLOW_STEPS", "StepConfig",
]

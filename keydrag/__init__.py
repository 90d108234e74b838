"""
keydrag - Keyboard window dragging.

Moves and centers windows from the keyboard on top of a host window
manager: 16 movement commands (8 directions, normal and slow), a center
command, hook lists around every move and center, and numeric keypad
bindings.
"""

from keydrag.core.direction import Direction, SpeedMode
from keydrag.core.hooks import HookEvent, HookRegistry
from keydrag.core.steps import StepConfig
from keydrag.extension import Keydrag

__version__ = "1.7.0"

__all__ = [
    "Direction", "SpeedMode", "HookEvent", "HookRegistry",
    "StepConfig", "Keydrag",
]

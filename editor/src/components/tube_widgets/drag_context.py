"""Drag context dataclass for tube manipulation.

Everything a gesture needs is captured once at press time; moves are then
evaluated against this frozen starting point instead of the previous move.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from models.transform import Vec2

if TYPE_CHECKING:
    from models.tube import Tube


@dataclass
class DragContext:
    """Drag state for one press -> move* -> release gesture.

    start_tube is a clone of the manipulated tube at press time, never the
    live tube itself.
    """
    start_tube: 'Tube'
    press_point: Vec2
    operation: str = None  # last applied: 'translate' | 'rotate'
    moves: int = 0

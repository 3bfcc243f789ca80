"""Tube model - one hollow rectangular cross-section on the canvas."""
from dataclasses import dataclass, asdict, replace

from constants import (
    DEFAULT_TUBE_LENGTH, DEFAULT_TUBE_WIDTH,
    DEFAULT_TUBE_THICKNESS, DEFAULT_TUBE_ROTATION,
)
from models.shape import make_outline, PlacedShape
from models.transform import Vec2


@dataclass(eq=False)
class Tube:
    """Rectangular tube cross-section.

    Position is the centre in canvas coordinates. Rotation is in radians and is
    never normalized; only its value modulo 2*pi affects rendering and hit
    testing.

    Equality is identity: two tubes with identical fields are still distinct
    entities in a scene. Use same_geometry() to compare values.
    """
    x: float
    y: float
    length: float = DEFAULT_TUBE_LENGTH
    width: float = DEFAULT_TUBE_WIDTH
    thickness: float = DEFAULT_TUBE_THICKNESS
    rotation: float = DEFAULT_TUBE_ROTATION

    @property
    def center(self):
        return Vec2(self.x, self.y)

    def outline(self):
        """Local-space outline (SolidRect or FramedRect) from the size fields."""
        return make_outline(self.length, self.width, self.thickness)

    def world_outline(self):
        """Outline translated to the centre, then rotated about it."""
        return PlacedShape(self.outline(), self.center, self.rotation)

    def hit_test(self, point) -> bool:
        """True if point lies on the tube's frame (never inside the hole)."""
        return self.world_outline().contains(point)

    def copy(self):
        """Independent clone with identical fields."""
        return replace(self)

    def same_geometry(self, other):
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(**data)

"""Point and vector value types for canvas coordinates."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y pair in canvas space:
    - Pointer positions delivered by mouse events
    - Tube centres
    - Drag offsets (cursor - press point)
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def angle(self):
        """Signed angle of this vector in radians, atan2 semantics (-pi, pi]."""
        return math.atan2(self.y, self.x)

    @classmethod
    def of(cls, point):
        """Coerce a Vec2, (x, y) tuple or Qt point into a Vec2."""
        if isinstance(point, cls):
            return point
        if hasattr(point, 'x') and callable(point.x):
            return cls(float(point.x()), float(point.y()))
        x, y = point
        return cls(float(x), float(y))

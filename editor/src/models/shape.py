"""Outline shapes for tube cross-sections.

A tube outline is one of two tagged variants:
- SolidRect:  a filled length x width rectangle centred at the origin
- FramedRect: the same rectangle with a concentric rectangular hole

Shapes are defined in local space. PlacedShape pairs a local shape with a
translation and rotation; the rotation stays in the transform and is never
baked into the stored dimensions, so containment is always tested against the
exact axis-aligned local rectangles.

Vertex rings are emitted for rendering as an even-odd polygon set: the outer
ring first, the hole ring (if any) in the opposite winding.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from models.transform import Vec2


def rect_ring(length, width, reverse=False):
    """Corner vertices of a length x width rectangle centred at the origin.

    Returns:
        (4, 2) float array, clockwise in screen space (y down) unless reverse
    """
    hl = length / 2.0
    hw = width / 2.0
    ring = np.array([
        [-hl, -hw],
        [hl, -hw],
        [hl, hw],
        [-hl, hw],
    ], dtype=float)
    if reverse:
        ring = ring[::-1].copy()
    return ring


def _inside_rect(lx, ly, length, width):
    """Closed containment test against an origin-centred rectangle."""
    if length <= 0 or width <= 0:
        return False
    return abs(lx) <= length / 2.0 and abs(ly) <= width / 2.0


class OutlineShape(ABC):
    """Base class for local-space tube outlines."""

    @abstractmethod
    def contains_local(self, lx, ly) -> bool:
        """Test a point already expressed in the shape's local space."""
        pass

    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def rings(self):
        """Vertex rings (list of (N, 2) arrays) in local space."""
        pass

    def is_degenerate(self):
        return self.area() <= 0.0


@dataclass(frozen=True)
class SolidRect(OutlineShape):
    """Filled rectangle; used when the wall thickness leaves no hole."""
    length: float
    width: float

    def contains_local(self, lx, ly):
        return _inside_rect(lx, ly, self.length, self.width)

    def area(self):
        if self.length <= 0 or self.width <= 0:
            return 0.0
        return self.length * self.width

    def rings(self):
        if self.is_degenerate():
            return []
        return [rect_ring(self.length, self.width)]


@dataclass(frozen=True)
class FramedRect(OutlineShape):
    """Picture-frame rectangle: outer rectangle minus a concentric hole.

    Only constructed when both hole dimensions are positive.
    """
    length: float
    width: float
    inner_length: float
    inner_width: float

    def contains_local(self, lx, ly):
        if not _inside_rect(lx, ly, self.length, self.width):
            return False
        # Hole is open: its boundary belongs to the frame
        in_hole = abs(lx) < self.inner_length / 2.0 and abs(ly) < self.inner_width / 2.0
        return not in_hole

    def area(self):
        if self.length <= 0 or self.width <= 0:
            return 0.0
        return self.length * self.width - self.inner_length * self.inner_width

    def rings(self):
        if self.is_degenerate():
            return []
        return [
            rect_ring(self.length, self.width),
            rect_ring(self.inner_length, self.inner_width, reverse=True),
        ]


def make_outline(length, width, thickness):
    """Build the local outline for a tube's size fields.

    The hole is subtracted only when length - 2*thickness > 0 and
    width - 2*thickness > 0; otherwise the outline is solid.
    """
    inner_length = length - thickness * 2
    inner_width = width - thickness * 2
    if inner_length > 0 and inner_width > 0:
        return FramedRect(length, width, inner_length, inner_width)
    return SolidRect(length, width)


@dataclass(frozen=True)
class PlacedShape:
    """A local outline translated to (offset) then rotated about it."""
    shape: OutlineShape
    offset: Vec2
    rotation: float = 0.0

    def to_local(self, point):
        """Map a canvas point into the shape's local space."""
        p = Vec2.of(point) - self.offset
        c = math.cos(self.rotation)
        s = math.sin(self.rotation)
        # Inverse rotation: R(-a) applied to p
        return p.x * c + p.y * s, -p.x * s + p.y * c

    def contains(self, point) -> bool:
        if self.shape.is_degenerate():
            return False
        lx, ly = self.to_local(point)
        return self.shape.contains_local(lx, ly)

    def area(self):
        return self.shape.area()

    def rotation_matrix(self):
        c = math.cos(self.rotation)
        s = math.sin(self.rotation)
        return np.array([[c, -s], [s, c]], dtype=float)

    def rings(self):
        """World-space vertex rings for rendering."""
        matrix = self.rotation_matrix()
        origin = np.array([self.offset.x, self.offset.y], dtype=float)
        return [ring @ matrix.T + origin for ring in self.shape.rings()]


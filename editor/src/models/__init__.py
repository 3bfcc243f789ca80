"""
Tube Joint Designer - Data Models

This module contains the data model classes for the tube scene.
This is the MODEL in MVC architecture.

Public API: Tube, Scene, and the outline shape variants
"""

from .tube import Tube
from .scene import Scene
from .shape import SolidRect, FramedRect, PlacedShape, make_outline
from .transform import Vec2

__all__ = ['Tube', 'Scene', 'SolidRect', 'FramedRect', 'PlacedShape', 'make_outline', 'Vec2']

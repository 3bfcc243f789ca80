"""
Tube Joint Designer - Tube Manipulation Components

- drag_context.py: captured state for one drag gesture
- gestures.py: translate/rotate gestures and the per-move gesture resolver
"""

from .drag_context import DragContext
from .gestures import (
    Gesture, TranslateGesture, RotateGesture,
    TRANSLATE, ROTATE, resolve_gesture, apply_drag
)

__all__ = [
    'DragContext',
    'Gesture', 'TranslateGesture', 'RotateGesture',
    'TRANSLATE', 'ROTATE', 'resolve_gesture', 'apply_drag',
]

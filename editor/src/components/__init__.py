"""UI components for Tube Joint Designer

This package contains all UI components organized into subpackages:
- tube_widgets: drag context and gestures (no Qt dependency)
- canvas_widgets: rendering mixins for the tube canvas
- canvas_area_helpers: control bar below the canvas

Qt widgets are imported from their modules directly, e.g.
    from components.canvas_area import CanvasArea
so that the Qt-free parts can be imported without a display.
"""

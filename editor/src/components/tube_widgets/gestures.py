"""Tube drag gestures.

Each gesture is a pure function of the state captured at press time and the
current pointer position:

    new_state = gesture.drag(current_point, start_tube, press_point)

Nothing is accumulated between move events, so the result only depends on
where the pointer is now, never on the path it took to get there.
"""

from abc import ABC, abstractmethod

from models.angle_presets import is_free_mode
from models.transform import Vec2

TRANSLATE = 'translate'
ROTATE = 'rotate'


class Gesture(ABC):
    """Abstract base class for drag gestures."""

    operation = None

    @abstractmethod
    def drag(self, current_point, start_tube, press_point) -> dict:
        """Compute the tube fields produced by this gesture.

        Args:
            current_point: Pointer position now (canvas coordinates)
            start_tube: Tube clone captured at press time
            press_point: Pointer position at press time

        Returns:
            dict of field name -> new value, applied onto the live tube
        """
        pass


class TranslateGesture(Gesture):
    """Move the tube by the pointer displacement since the press."""

    operation = TRANSLATE

    def drag(self, current_point, start_tube, press_point):
        delta = Vec2.of(current_point) - Vec2.of(press_point)
        return {
            'x': start_tube.x + delta.x,
            'y': start_tube.y + delta.y,
        }


class RotateGesture(Gesture):
    """Spin the tube about its original centre by the angle swept by the pointer."""

    operation = ROTATE

    def drag(self, current_point, start_tube, press_point):
        center = start_tube.center
        angle = (Vec2.of(current_point) - center).angle()
        start_angle = (Vec2.of(press_point) - center).angle()
        return {
            'rotation': start_tube.rotation + (angle - start_angle),
        }


_TRANSLATE = TranslateGesture()
_ROTATE = RotateGesture()


def resolve_gesture(shift_held, angle_mode):
    """Pick the gesture for one move event.

    Rotation needs both the shift modifier and the "Free" angle mode. Any other
    combination, including shift with a preset selected, translates.
    """
    if shift_held and is_free_mode(angle_mode):
        return _ROTATE
    return _TRANSLATE


def apply_drag(context, tube, current_point, shift_held, angle_mode):
    """Apply one move event of a drag to the live tube.

    Args:
        context: DragContext captured at press time
        tube: Live tube being manipulated
        current_point: Pointer position now
        shift_held: Whether the shift modifier is down for this event
        angle_mode: Current angle selector value

    Returns:
        str: The operation applied ('translate' or 'rotate')
    """
    gesture = resolve_gesture(shift_held, angle_mode)
    for name, value in gesture.drag(current_point, context.start_tube, context.press_point).items():
        setattr(tube, name, value)
    context.operation = gesture.operation
    context.moves += 1
    return gesture.operation

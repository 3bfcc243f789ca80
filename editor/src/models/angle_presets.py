"""Angle selector values.

The selector holds either "Free" (shift-drag rotation allowed) or a preset
such as "45°" that assigns an absolute rotation to the selected tube.
"""

import math

from constants import ANGLE_MODE_FREE, ANGLE_OPTIONS, ANGLE_PRESET_SUFFIX


def is_free_mode(angle_mode):
    return angle_mode == ANGLE_MODE_FREE


def parse_angle_preset(angle_mode):
    """Convert a selector value to radians.

    Args:
        angle_mode: Selector text, e.g. "90°" or "Free"

    Returns:
        float radians, or None for "Free" and any other non-numeric value
    """
    if angle_mode is None or is_free_mode(angle_mode):
        return None
    text = str(angle_mode).strip().replace(ANGLE_PRESET_SUFFIX, "")
    try:
        degrees = float(text)
    except ValueError:
        return None
    if not math.isfinite(degrees):
        return None
    return math.radians(degrees)


def is_known_option(angle_mode):
    return angle_mode in ANGLE_OPTIONS

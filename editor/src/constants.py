"""
Tube Joint Designer - Constants and Configuration

This module contains all constant values used throughout the application:
- Default tube geometry for the Add command
- Angle selector presets
- Rendering colors for the canvas
- Window and history settings
- Logging configuration
"""

# ======================================================================
# DEFAULT TUBE GEOMETRY
# ======================================================================
# Canvas units are pixels; there is no unit/scale system.

DEFAULT_TUBE_LENGTH = 200.0
DEFAULT_TUBE_WIDTH = 50.0
DEFAULT_TUBE_THICKNESS = 5.0
DEFAULT_TUBE_ROTATION = 0.0

# ======================================================================
# ANGLE SELECTOR
# ======================================================================
# Listed in the order they appear in the dropdown.
# "Free" enables shift-drag rotation; every other entry is a preset in degrees.

ANGLE_MODE_FREE = "Free"
ANGLE_PRESET_SUFFIX = "°"

ANGLE_OPTIONS = [
    ANGLE_MODE_FREE,
    "0°",
    "30°",
    "45°",
    "90°",
    "135°",
]

DEFAULT_ANGLE_MODE = ANGLE_MODE_FREE

# ======================================================================
# RENDERING
# ======================================================================
# RGB tuples, consumed by QColor(*rgb)

CANVAS_BACKGROUND_COLOR = (255, 255, 255)
TUBE_FILL_COLOR = (192, 192, 192)       # light gray
TUBE_SELECTED_FILL_COLOR = (0, 255, 255)  # cyan
TUBE_OUTLINE_COLOR = (0, 0, 0)
TUBE_OUTLINE_WIDTH = 1.0

# ======================================================================
# WINDOW
# ======================================================================

WINDOW_TITLE = "Tube Joint Designer"
DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 800
BOTTOM_BAR_HEIGHT = 50

# ======================================================================
# HISTORY
# ======================================================================

# None = unbounded undo stack
MAX_HISTORY_ENTRIES = None

HISTORY_INITIAL = "Initial state"
HISTORY_ADD_TUBE = "Add tube"
HISTORY_DRAG_TUBE = "Drag tube"
HISTORY_SET_ANGLE = "Set angle"

# ======================================================================
# CONFIG / LOGGING
# ======================================================================

CONFIG_DIR_NAME = ".tubejoint"
CONFIG_FILE_NAME = "config.json"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

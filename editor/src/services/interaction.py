"""
Interaction controller - binds pointer gestures and commands to the scene.

The controller is the only writer of the scene. Every discrete mutation is
preceded by exactly one history snapshot:
- add tube            -> snapshot, append, select
- press on a tube     -> snapshot, capture drag context
- preset angle choice -> snapshot, overwrite rotation

Move events during a drag never snapshot, so a whole drag undoes as one step.

Gesture state machine:
    Idle --press(hit)--> Dragging --release--> Idle
    Idle --press(miss)--> Idle (selection cleared)

The angle selector is owned by the UI; the controller only reads it through
angle_mode_provider, on every move and on preset changes.
"""

import logging

from components.tube_widgets import DragContext, apply_drag
from constants import (
    DEFAULT_ANGLE_MODE, MAX_HISTORY_ENTRIES,
    DEFAULT_TUBE_LENGTH, DEFAULT_TUBE_WIDTH, DEFAULT_TUBE_THICKNESS,
    HISTORY_INITIAL, HISTORY_ADD_TUBE, HISTORY_DRAG_TUBE, HISTORY_SET_ANGLE,
)
from models.angle_presets import parse_angle_preset
from models.scene import Scene
from models.transform import Vec2
from models.tube import Tube
from utils.history_manager import HistoryManager

STATE_IDLE = 'idle'
STATE_DRAGGING = 'dragging'


class InteractionController:
    """Owns the scene and its undo history; turns input into scene edits."""

    def __init__(self, scene=None, history=None, angle_mode_provider=None,
                 max_history=MAX_HISTORY_ENTRIES):
        """
        Args:
            scene: Scene to edit (a new empty scene if omitted)
            history: HistoryManager (a new one capped at max_history if omitted)
            angle_mode_provider: Callable returning the current angle selector value
            max_history: History cap used when history is not supplied
        """
        self._logger = logging.getLogger('Interaction')
        self.scene = scene if scene is not None else Scene()
        self.history = history if history is not None else HistoryManager(max_history=max_history)
        self.angle_mode_provider = angle_mode_provider
        self.drag_context = None
        self._listeners = []

        # Seed snapshot: the floor the undo stack never goes below
        if len(self.history) == 0:
            self.history.save_state(self.scene.get_snapshot(), HISTORY_INITIAL)

    # ========================================
    # Observers
    # ========================================

    def add_listener(self, callback):
        """Register a no-argument callback fired after every scene change."""
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in self._listeners:
            callback()

    # ========================================
    # State queries
    # ========================================

    @property
    def state(self):
        return STATE_DRAGGING if self.drag_context is not None else STATE_IDLE

    @property
    def is_dragging(self):
        return self.drag_context is not None

    @property
    def selected_tube(self):
        return self.scene.selected_tube

    def get_angle_mode(self):
        if self.angle_mode_provider is None:
            return DEFAULT_ANGLE_MODE
        return self.angle_mode_provider()

    # ========================================
    # History
    # ========================================

    def save_state(self, description):
        """Snapshot the tubes before a mutation."""
        self.history.save_state(self.scene.get_snapshot(), description)

    def undo(self):
        """Revert the most recent action; silent no-op at the seed state.

        Returns:
            bool: True if a state was restored
        """
        state = self.history.undo()
        if state is None:
            return False
        self.drag_context = None
        self.scene.set_snapshot(state)
        self._notify()
        return True

    # ========================================
    # Commands
    # ========================================

    def add_tube(self, tube):
        """Snapshot, then append tube on top and select it."""
        self.save_state(HISTORY_ADD_TUBE)
        self.scene.add_tube(tube)
        self._notify()
        return tube

    def add_default_tube(self, center):
        """Add a tube with the default geometry centred on center."""
        center = Vec2.of(center)
        tube = Tube(
            center.x, center.y,
            DEFAULT_TUBE_LENGTH, DEFAULT_TUBE_WIDTH, DEFAULT_TUBE_THICKNESS,
        )
        return self.add_tube(tube)

    def set_angle_preset(self, angle_mode=None):
        """Apply a preset angle to the selected tube.

        "Free" and any non-numeric value are recognized no-ops; they only
        change how future shift-drags behave.

        Args:
            angle_mode: Selector value; read from the provider when omitted

        Returns:
            bool: True if the selected tube was rotated
        """
        if angle_mode is None:
            angle_mode = self.get_angle_mode()
        tube = self.scene.selected_tube
        if tube is None:
            return False
        radians = parse_angle_preset(angle_mode)
        if radians is None:
            return False

        self.save_state(f"{HISTORY_SET_ANGLE} {angle_mode}")
        tube.rotation = radians
        self._logger.debug(f"Set tube {self.scene.selected_index} rotation to {angle_mode}")
        self._notify()
        return True

    # ========================================
    # Pointer input
    # ========================================

    def press(self, point):
        """Select the topmost tube under point and start a drag on it.

        Clicking empty space clears the selection and starts nothing.
        """
        point = Vec2.of(point)
        hit = self.scene.topmost_hit(point)
        self.scene.select(hit)

        if hit is not None:
            self.save_state(HISTORY_DRAG_TUBE)
            self.drag_context = DragContext(start_tube=hit.copy(), press_point=point)
        else:
            self.drag_context = None

        self._notify()
        return hit

    def move(self, point, shift_held=False):
        """Update the dragged tube for the current pointer position.

        The gesture is chosen on every call: shift + "Free" rotates,
        anything else translates.

        Returns:
            str: Operation applied, or None when no drag is active
        """
        if self.drag_context is None:
            return None
        tube = self.scene.selected_tube
        if tube is None:
            return None

        operation = apply_drag(
            self.drag_context, tube, Vec2.of(point),
            shift_held, self.get_angle_mode(),
        )
        self._notify()
        return operation

    def clear_selection(self):
        """Deselect without touching history (selection is not undoable)."""
        self.scene.clear_selection()
        self._notify()

    def release(self, point=None):
        """End the drag; the selection is kept."""
        if self.drag_context is not None:
            self._logger.debug(
                f"Drag ended after {self.drag_context.moves} move(s), "
                f"last operation: {self.drag_context.operation}"
            )
        self.drag_context = None

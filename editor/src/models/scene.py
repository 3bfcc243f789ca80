"""
Tube Joint Designer - Scene Model

The scene is the single document edited by the application:
- An ordered list of tubes (z-order: later tubes paint and hit-test on top)
- At most one selected tube, held as a slot index into that list

Snapshots contain tube geometry only. Selection is UI state and is never
captured; restoring a snapshot always leaves the scene with no selection.
"""

import logging

from models.tube import Tube


class Scene:
    """Ordered tube collection plus the current selection."""

    def __init__(self):
        self._logger = logging.getLogger('Scene')
        self._tubes = []
        self._selected_index = None

    # ========================================
    # Tubes
    # ========================================

    @property
    def tubes(self):
        """Live tubes in z-order (bottom first). Do not mutate the list."""
        return self._tubes

    def get_tube_count(self):
        return len(self._tubes)

    def index_of(self, tube):
        """Slot of a tube by identity, or None if it is not in the scene."""
        for index, candidate in enumerate(self._tubes):
            if candidate is tube:
                return index
        return None

    def add_tube(self, tube):
        """Append a tube on top of the z-order and select it.

        Callers that record history must snapshot before calling this.
        """
        self._tubes.append(tube)
        self._selected_index = len(self._tubes) - 1
        self._logger.debug(f"Added tube {self._selected_index} at ({tube.x:.1f}, {tube.y:.1f})")
        return self._selected_index

    def topmost_hit(self, point):
        """Return the topmost tube containing point, or None."""
        for tube in reversed(self._tubes):
            if tube.hit_test(point):
                return tube
        return None

    # ========================================
    # Selection
    # ========================================

    @property
    def selected_index(self):
        return self._selected_index

    @property
    def selected_tube(self):
        # select() and set_snapshot() only ever store a valid slot or None
        if self._selected_index is None:
            return None
        return self._tubes[self._selected_index]

    def select(self, tube):
        """Select a tube by identity; None clears the selection."""
        if tube is None:
            self._selected_index = None
            return
        index = self.index_of(tube)
        if index is None:
            self._logger.warning("Ignoring selection of a tube that is not in the scene")
        self._selected_index = index

    def clear_selection(self):
        self._selected_index = None

    def is_selected(self, tube):
        return tube is not None and self.selected_tube is tube

    # ========================================
    # Snapshots
    # ========================================

    def get_snapshot(self):
        """Capture tube geometry as plain field values (no selection)."""
        return {
            'tubes': [tube.to_dict() for tube in self._tubes],
        }

    def set_snapshot(self, snapshot):
        """Replace every tube with fresh objects built from a snapshot.

        The selection is cleared: old tube references do not survive a restore.
        """
        self._tubes = [Tube.from_dict(data) for data in snapshot.get('tubes', [])]
        self._selected_index = None
        self._logger.debug(f"Restored snapshot with {len(self._tubes)} tube(s)")

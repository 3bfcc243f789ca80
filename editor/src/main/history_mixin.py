"""Undo commands and status bar updates for the designer window"""

from utils.logger import loggerRaise


class HistoryMixin:
    """Undo, add-tube commands and status bar state"""

    def _on_history_changed(self, can_undo):
        """Called when history state changes to update UI"""
        if hasattr(self, 'undo_action'):
            self.undo_action.setEnabled(can_undo)
        self._update_status_bar()

    def _on_scene_changed(self):
        """Controller listener: selection or geometry changed"""
        self._update_status_bar()

    def _update_status_bar(self):
        """Update status bar with last action and scene stats"""
        if not hasattr(self, 'controller'):
            return

        # Left side: last recorded action
        history = self.controller.history
        if history.can_undo():
            left_msg = f"Last action: {history.get_undo_description()}"
        else:
            left_msg = "Ready"

        # Right side: stats
        scene = self.controller.scene
        tube_count = scene.get_tube_count()
        selected_index = scene.selected_index if scene.selected_tube is not None else None

        if selected_index is not None:
            right_msg = f"Tubes: {tube_count} | Selected: Tube {selected_index + 1}"
        else:
            right_msg = f"Tubes: {tube_count} | No selection"

        if hasattr(self, 'status_left'):
            self.status_left.setText(left_msg)
        if hasattr(self, 'status_right'):
            self.status_right.setText(right_msg)

    def undo(self):
        """Undo the last action"""
        try:
            self.canvas_area.undo()
        except Exception as e:
            loggerRaise(e, "Error restoring history state")

    def add_tube(self):
        """Add a default tube in the middle of the canvas"""
        try:
            self.canvas_area.add_tube()
        except Exception as e:
            loggerRaise(e, "Error adding tube")

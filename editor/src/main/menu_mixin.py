"""Menu bar creation and menu action handlers for the designer window"""

from PyQt5.QtWidgets import QMessageBox, QActionGroup

from constants import ANGLE_OPTIONS, WINDOW_TITLE
from version import get_version


class MenuMixin:
    """Menu bar and menu action handlers"""

    def _create_menu_bar(self):
        """Create the menu bar with File, Edit, Help menus"""
        menubar = self.menuBar()

        # File Menu
        file_menu = menubar.addMenu("&File")

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)

        # Edit Menu
        self.edit_menu = menubar.addMenu("&Edit")

        self.undo_action = self.edit_menu.addAction("&Undo")
        self.undo_action.setShortcut("Ctrl+Z")
        self.undo_action.triggered.connect(self.undo)
        self.undo_action.setEnabled(False)

        self.edit_menu.addSeparator()

        self.add_tube_action = self.edit_menu.addAction("Add &Tube")
        self.add_tube_action.setShortcut("Ctrl+T")
        self.add_tube_action.triggered.connect(self.add_tube)

        self.edit_menu.addSeparator()

        # Angle submenu mirrors the bottom bar dropdown
        angle_menu = self.edit_menu.addMenu("&Angle")
        self.angle_action_group = QActionGroup(self)
        self.angle_action_group.setExclusive(True)
        self.angle_actions = {}
        for angle_mode in ANGLE_OPTIONS:
            action = angle_menu.addAction(angle_mode)
            action.setCheckable(True)
            action.triggered.connect(lambda checked, m=angle_mode: self._on_angle_menu_triggered(m))
            self.angle_action_group.addAction(action)
            self.angle_actions[angle_mode] = action

        # Help Menu
        help_menu = menubar.addMenu("&Help")

        controls_action = help_menu.addAction("&Controls")
        controls_action.triggered.connect(self._show_controls)

        about_action = help_menu.addAction("&About")
        about_action.triggered.connect(self._show_about)

    def _on_angle_menu_triggered(self, angle_mode):
        """Angle picked from the menu - same effect as picking it in the dropdown"""
        self.canvas_area.apply_angle_mode(angle_mode)

    def _sync_angle_menu(self, angle_mode):
        """Check the menu entry matching the dropdown"""
        action = self.angle_actions.get(angle_mode) if hasattr(self, 'angle_actions') else None
        if action is not None:
            action.setChecked(True)

    def _show_controls(self):
        QMessageBox.information(
            self,
            "Controls",
            "Click a tube to select it; click empty space to deselect.\n"
            "Drag a tube to move it.\n"
            "Shift+drag rotates the tube when Angle is set to Free.\n"
            "Pick an angle preset to set the selected tube's rotation.\n"
            "Ctrl+T adds a tube, Ctrl+Z undoes the last change."
        )

    def _show_about(self):
        QMessageBox.about(self, f"About {WINDOW_TITLE}", f"{WINDOW_TITLE}\nVersion {get_version()}")

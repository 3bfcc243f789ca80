"""Tube Joint Designer - desktop entry point.

Usage:
    python editor/src/tube_designer.py [-v]
    tube-designer [-v]
"""

import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QLabel
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

from components.canvas_area import CanvasArea
from constants import WINDOW_TITLE, LOG_FORMAT
from services.interaction import InteractionController
from utils.logger import set_main_window
from version import get_version

# Mixin imports
from main.menu_mixin import MenuMixin
from main.event_mixin import EventMixin
from main.config_mixin import ConfigMixin
from main.history_mixin import HistoryMixin


class TubeDesigner(MenuMixin, EventMixin, ConfigMixin, HistoryMixin, QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} {get_version()}")

        # Preferences first: the history cap is needed to build the controller
        self._init_config_paths()
        self._load_config()
        width, height = self.config['window_size']
        self.resize(width, height)

        # Controller owns the scene and the undo stack (seeded on creation)
        self.controller = InteractionController(max_history=self.config['max_history'])
        self.controller.history.add_listener(self._on_history_changed)
        self.controller.add_listener(self._on_scene_changed)

        # Initialize global logger with main window reference
        set_main_window(self)

        self.setup_ui()

    def setup_ui(self):
        self._create_menu_bar()

        self.canvas_area = CanvasArea(self, controller=self.controller)
        self.canvas_area.main_window = self
        self.setCentralWidget(self.canvas_area)

        # Restore the last angle mode without rotating anything
        self.canvas_area.set_angle_mode(self.config['angle_mode'])
        self._sync_angle_menu(self.config['angle_mode'])
        self.canvas_area.bottom_bar.angle_combo.currentTextChanged.connect(self._sync_angle_menu)

        # Status bar: last action on the left, scene stats on the right
        self.status_left = QLabel("Ready")
        self.status_right = QLabel("")
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_right)
        self._update_status_bar()


_PANEL = QColor(53, 53, 53)
_DARK_ROLES = {
    QPalette.Window: _PANEL,
    QPalette.AlternateBase: _PANEL,
    QPalette.Button: _PANEL,
    QPalette.Base: QColor(25, 25, 25),
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: QColor(Qt.black),
}
_LIGHT_TEXT_ROLES = (
    QPalette.WindowText, QPalette.Text, QPalette.ButtonText,
    QPalette.ToolTipBase, QPalette.ToolTipText,
)


def build_dark_palette():
    """Fusion dark theme for the window chrome (the canvas stays white)"""
    palette = QPalette()
    for role, color in _DARK_ROLES.items():
        palette.setColor(role, color)
    for role in _LIGHT_TEXT_ROLES:
        palette.setColor(role, QColor(Qt.white))
    return palette


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Interactive editor for rectangular tube cross-sections.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    # Qt consumes its own arguments (e.g. -style); ignore what we don't know
    args, _ = parser.parse_known_args(argv)
    return args


def main():
    """Main entry point for the Tube Joint Designer application"""
    args = parse_args()

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QtWidgets.QApplication(sys.argv)

    app.setStyle("Fusion")
    app.setPalette(build_dark_palette())

    window = TubeDesigner()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())

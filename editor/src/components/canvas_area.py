# PyQt5 imports
from PyQt5.QtWidgets import QFrame, QVBoxLayout

# Local component imports
from .canvas_widget import TubeCanvas
from .canvas_area_helpers.bottom_bar import BottomBar
from services.interaction import InteractionController


class CanvasArea(QFrame):
    """Center area: tube canvas above the angle/add/undo control bar"""

    def __init__(self, parent=None, controller=None):
        super().__init__(parent)
        self.setStyleSheet("QFrame { background-color: #141414; }")
        self.main_window = None  # Will be set by main window

        self._setup_ui()

        # Controller reads the angle dropdown live through the provider
        if controller is None:
            controller = InteractionController(angle_mode_provider=self.get_angle_mode)
        elif controller.angle_mode_provider is None:
            controller.angle_mode_provider = self.get_angle_mode
        self.controller = controller
        self.canvas_widget.set_controller(controller)

        controller.history.add_listener(self.bottom_bar.set_undo_enabled)
        self.bottom_bar.set_undo_enabled(controller.history.can_undo())

    def _setup_ui(self):
        """Setup the canvas area UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.canvas_widget = TubeCanvas(self)
        self.canvas_widget.canvas_area = self
        layout.addWidget(self.canvas_widget, stretch=1)

        self.bottom_bar = BottomBar(self)
        layout.addWidget(self.bottom_bar)

    # ========================================
    # Angle selector
    # ========================================

    def get_angle_mode(self):
        """Get current angle mode from dropdown - delegates to bottom_bar"""
        return self.bottom_bar.get_angle_mode()

    def set_angle_mode(self, angle_mode):
        """Show angle_mode in the dropdown without touching any tube"""
        self.bottom_bar.set_angle_mode(angle_mode)

    def apply_angle_mode(self, angle_mode):
        """Angle chosen by the user: select it and rotate the selected tube"""
        self.set_angle_mode(angle_mode)
        return self.controller.set_angle_preset(angle_mode)

    # ========================================
    # Commands
    # ========================================

    def add_tube(self):
        """Add a default tube centred in the visible canvas"""
        return self.controller.add_default_tube(self.canvas_widget.viewport_center())

    def undo(self):
        return self.controller.undo()

"""Bottom bar component for canvas area - angle selector, add tube and undo"""
from PyQt5.QtWidgets import QFrame, QHBoxLayout
from components.ui_helpers import create_angle_combo, create_bar_label, create_bar_button
from constants import ANGLE_OPTIONS, DEFAULT_ANGLE_MODE, BOTTOM_BAR_HEIGHT


class BottomBar(QFrame):
	"""Bottom control bar with the angle dropdown and tube command buttons"""

	def __init__(self, canvas_area):
		"""Initialize bottom bar

		Args:
			canvas_area: Parent CanvasArea instance
		"""
		super().__init__()
		self.canvas_area = canvas_area

		self.setStyleSheet("QFrame { background-color: #2d2d2d; border: none; }")
		self.setFixedHeight(BOTTOM_BAR_HEIGHT)

		self._setup_ui()

	def _setup_ui(self):
		"""Setup the bottom bar UI"""
		layout = QHBoxLayout(self)
		layout.setContentsMargins(10, 5, 10, 5)
		layout.setSpacing(15)

		layout.addStretch(1)

		# Angle dropdown
		layout.addWidget(create_bar_label("Angle:"))

		self.angle_combo = create_angle_combo(ANGLE_OPTIONS, DEFAULT_ANGLE_MODE)
		self.angle_combo.setToolTip(
			"Angle:\n"
			"Free - Shift+drag rotates the tube\n"
			"Preset - Sets the selected tube's angle (Shift+drag only moves)"
		)
		self.angle_combo.activated[str].connect(self._on_angle_activated)
		layout.addWidget(self.angle_combo)

		layout.addSpacing(20)

		self.add_tube_btn = create_bar_button(
			"Add Tube", "Add a tube in the middle of the canvas (Ctrl+T)",
			self.canvas_area.add_tube,
		)
		layout.addWidget(self.add_tube_btn)

		self.undo_btn = create_bar_button(
			"Undo", "Undo the last change (Ctrl+Z)",
			self.canvas_area.undo, enabled=False,
		)
		layout.addWidget(self.undo_btn)

		layout.addStretch(1)

	def _on_angle_activated(self, angle_mode):
		"""User picked an entry (re-picking the same entry applies it again)"""
		self.canvas_area.apply_angle_mode(angle_mode)

	def get_angle_mode(self):
		"""Current angle selector value, read live by the controller"""
		return self.angle_combo.currentText()

	def set_angle_mode(self, angle_mode):
		"""Change the selector without applying the preset to any tube"""
		self.angle_combo.blockSignals(True)
		try:
			self.angle_combo.setCurrentText(angle_mode)
		finally:
			self.angle_combo.blockSignals(False)

	def set_undo_enabled(self, enabled):
		self.undo_btn.setEnabled(enabled)

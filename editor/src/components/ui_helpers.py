"""Shared widget factories for the control bar"""

from PyQt5.QtWidgets import QComboBox, QLabel, QPushButton
from PyQt5.QtCore import Qt

_COMBO_STYLE = """
	QComboBox {
		padding: 5px 5px;
		padding-right: 20px;
		border-radius: 3px;
		border: none;
	}
	QComboBox::drop-down {
		border: none;
		width: 16px;
	}
	QComboBox::down-arrow {
		image: none;
	}
"""


class ArrowComboBox(QComboBox):
	"""Flat combo box that draws its drop-down arrow as a text glyph"""

	ARROW_WIDTH = 20

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setStyleSheet(_COMBO_STYLE)
		self._arrow = QLabel("▼", self)
		self._arrow.setStyleSheet("color: #aaa; font-size: 10px; background: transparent;")
		self._arrow.setAttribute(Qt.WA_TransparentForMouseEvents)
		self._arrow.setAlignment(Qt.AlignCenter)
		self._place_arrow()

	def resizeEvent(self, event):
		super().resizeEvent(event)
		self._place_arrow()

	def _place_arrow(self):
		self._arrow.setGeometry(self.width() - self.ARROW_WIDTH, 0, self.ARROW_WIDTH, self.height())


def create_angle_combo(options, current, width=90):
	"""Angle selector populated with options, showing current

	Args:
		options: Selector entries in display order
		current: Entry shown initially
		width: Fixed pixel width
	"""
	combo = ArrowComboBox()
	combo.addItems(options)
	combo.setCurrentText(current)
	combo.setFixedWidth(width)
	return combo


def create_bar_label(text):
	"""Small borderless caption used in control bars"""
	label = QLabel(text)
	label.setStyleSheet("font-size: 11px; border: none;")
	return label


def create_bar_button(text, tooltip, slot, enabled=True):
	button = QPushButton(text)
	button.setToolTip(tooltip)
	button.setEnabled(enabled)
	button.clicked.connect(slot)
	return button

# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QSize
from PyQt5.QtGui import QPainter

# Local imports
from components.canvas_widgets.canvas_rendering_mixin import CanvasRenderingMixin
from models.transform import Vec2


class TubeCanvas(CanvasRenderingMixin, QWidget):
	"""Drawing surface for tubes.

	Thin view: mouse events go straight to the InteractionController and every
	controller change schedules a repaint. Positions are widget pixels, the
	same space tube centres live in.
	"""

	def __init__(self, parent=None, controller=None):
		super().__init__(parent)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setFocusPolicy(Qt.ClickFocus)
		self.controller = None
		if controller is not None:
			self.set_controller(controller)

	def set_controller(self, controller):
		"""Attach the controller and repaint whenever it reports a change"""
		if self.controller is not None:
			self.controller.remove_listener(self.update)
		self.controller = controller
		controller.add_listener(self.update)
		self.update()

	def sizeHint(self):
		return QSize(1000, 750)

	def viewport_center(self):
		"""Centre of the visible canvas, where new tubes are placed"""
		return Vec2(self.width() / 2, self.height() / 2)

	# ========================================
	# Qt events
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		try:
			if self.controller is not None:
				self.render_scene(painter)
			else:
				self._render_background(painter)
		finally:
			painter.end()

	def mousePressEvent(self, event):
		if self.controller is None:
			return super().mousePressEvent(event)
		self.controller.press(Vec2.of(event.pos()))
		event.accept()

	def mouseMoveEvent(self, event):
		if self.controller is None or not self.controller.is_dragging:
			return super().mouseMoveEvent(event)
		shift_held = bool(event.modifiers() & Qt.ShiftModifier)
		self.controller.move(Vec2.of(event.pos()), shift_held)
		event.accept()

	def mouseReleaseEvent(self, event):
		if self.controller is None:
			return super().mouseReleaseEvent(event)
		self.controller.release(Vec2.of(event.pos()))
		event.accept()

"""Canvas rendering mixin for tube drawing.

Tubes are drawn from their world outlines: each vertex ring becomes a closed
subpath of one QPainterPath filled with the odd-even rule, so the hole of a
framed tube stays unpainted. Hit testing uses the same rings' definition of
"inside" (frame yes, hole no).
"""

from PyQt5.QtCore import Qt, QPointF
from PyQt5.QtGui import QPainter, QPainterPath, QPen, QBrush, QColor, QPolygonF

from constants import (
	CANVAS_BACKGROUND_COLOR, TUBE_FILL_COLOR, TUBE_SELECTED_FILL_COLOR,
	TUBE_OUTLINE_COLOR, TUBE_OUTLINE_WIDTH
)


def build_outline_path(placed_shape):
	"""Convert a PlacedShape into an odd-even QPainterPath.

	Degenerate shapes produce an empty path.
	"""
	path = QPainterPath()
	path.setFillRule(Qt.OddEvenFill)
	for ring in placed_shape.rings():
		polygon = QPolygonF([QPointF(float(x), float(y)) for x, y in ring])
		path.addPolygon(polygon)
		path.closeSubpath()
	return path


class CanvasRenderingMixin:
	"""Mixin providing the tube paint pass.

	Expects the host widget to expose self.controller (InteractionController).
	"""

	def _render_background(self, painter):
		painter.fillRect(self.rect(), QColor(*CANVAS_BACKGROUND_COLOR))

	def _render_tubes(self, painter):
		"""Draw every tube bottom to top, highlighting the selection."""
		scene = self.controller.scene
		outline_pen = QPen(QColor(*TUBE_OUTLINE_COLOR), TUBE_OUTLINE_WIDTH)
		normal_brush = QBrush(QColor(*TUBE_FILL_COLOR))
		selected_brush = QBrush(QColor(*TUBE_SELECTED_FILL_COLOR))

		for tube in scene.tubes:
			path = build_outline_path(tube.world_outline())
			if path.isEmpty():
				continue
			brush = selected_brush if scene.is_selected(tube) else normal_brush
			painter.fillPath(path, brush)
			painter.strokePath(path, outline_pen)

	def render_scene(self, painter):
		"""Full frame: background then tubes, antialiased."""
		painter.setRenderHint(QPainter.Antialiasing)
		self._render_background(painter)
		self._render_tubes(painter)

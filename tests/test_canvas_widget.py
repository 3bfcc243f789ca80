"""
pytest-qt widget tests for the canvas and its control bar.

Covers:
- Mouse events routed to the controller (shift read per move event)
- Rendering: selected tube highlighted, hole left unpainted
- Bottom bar: add tube, undo button state, angle dropdown
"""
import math

import pytest
from PyQt5.QtCore import Qt, QEvent, QPointF
from PyQt5.QtGui import QColor, QMouseEvent

from constants import (
    CANVAS_BACKGROUND_COLOR, TUBE_FILL_COLOR, TUBE_SELECTED_FILL_COLOR,
)
from models.tube import Tube


def _mouse(kind, x, y, buttons=Qt.LeftButton, modifiers=Qt.NoModifier):
    button = Qt.NoButton if kind == QEvent.MouseMove else Qt.LeftButton
    return QMouseEvent(kind, QPointF(x, y), button, buttons, modifiers)


def _rgb(image, x, y):
    return QColor(image.pixel(x, y)).getRgb()[:3]


# ══════════════════════════════════════════════════════════════════════════
# TubeCanvas
# ══════════════════════════════════════════════════════════════════════════

class TestTubeCanvasInput:

    @pytest.fixture
    def canvas(self, qtbot, controller):
        from components.canvas_widget import TubeCanvas

        widget = TubeCanvas(controller=controller)
        qtbot.addWidget(widget)
        widget.resize(400, 300)
        controller.add_tube(Tube(200, 150))
        return widget

    def test_press_selects_and_starts_drag(self, canvas, controller):
        controller.clear_selection()
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, 200, 127))
        assert controller.selected_tube is controller.scene.tubes[0]
        assert controller.is_dragging

    def test_drag_translates(self, canvas, controller):
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, 200, 127))
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, 230, 117))
        canvas.mouseReleaseEvent(_mouse(QEvent.MouseButtonRelease, 230, 117))
        tube = controller.scene.tubes[0]
        assert (tube.x, tube.y) == (230, 140)
        assert not controller.is_dragging

    def test_shift_drag_rotates(self, canvas, controller):
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, 299, 150))
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, 200, 249, modifiers=Qt.ShiftModifier))
        assert controller.scene.tubes[0].rotation == pytest.approx(math.pi / 2)

    def test_shift_read_per_event(self, canvas, controller):
        canvas.mousePressEvent(_mouse(QEvent.MouseButtonPress, 299, 150))
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, 200, 249, modifiers=Qt.ShiftModifier))
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, 309, 160))
        tube = controller.scene.tubes[0]
        assert (tube.x, tube.y) == (210, 160)
        assert tube.rotation == pytest.approx(math.pi / 2)

    def test_move_without_press_is_ignored(self, canvas, controller):
        canvas.mouseMoveEvent(_mouse(QEvent.MouseMove, 10, 10))
        tube = controller.scene.tubes[0]
        assert (tube.x, tube.y) == (200, 150)

    def test_viewport_center(self, canvas):
        center = canvas.viewport_center()
        assert (center.x, center.y) == (200, 150)


class TestTubeCanvasRendering:

    @pytest.fixture
    def canvas(self, qtbot, controller):
        from components.canvas_widget import TubeCanvas

        widget = TubeCanvas(controller=controller)
        qtbot.addWidget(widget)
        widget.resize(400, 300)
        return widget

    def test_empty_canvas_is_background(self, canvas):
        image = canvas.grab().toImage()
        assert _rgb(image, 200, 150) == CANVAS_BACKGROUND_COLOR

    def test_selected_tube_highlighted_with_open_hole(self, canvas, controller):
        controller.add_tube(Tube(200, 150))
        image = canvas.grab().toImage()
        assert _rgb(image, 200, 127) == TUBE_SELECTED_FILL_COLOR
        assert _rgb(image, 200, 150) == CANVAS_BACKGROUND_COLOR
        assert _rgb(image, 20, 20) == CANVAS_BACKGROUND_COLOR

    def test_unselected_tube_uses_normal_fill(self, canvas, controller):
        controller.add_tube(Tube(200, 150))
        controller.clear_selection()
        image = canvas.grab().toImage()
        assert _rgb(image, 200, 127) == TUBE_FILL_COLOR

    def test_thick_tube_is_filled_solid(self, canvas, controller):
        controller.add_tube(Tube(200, 150, 200, 50, 30))
        image = canvas.grab().toImage()
        assert _rgb(image, 200, 150) == TUBE_SELECTED_FILL_COLOR


# ══════════════════════════════════════════════════════════════════════════
# CanvasArea + BottomBar
# ══════════════════════════════════════════════════════════════════════════

class TestCanvasArea:

    @pytest.fixture
    def area(self, qtbot):
        from components.canvas_area import CanvasArea

        widget = CanvasArea()
        qtbot.addWidget(widget)
        return widget

    def test_controller_reads_dropdown(self, area):
        assert area.controller.get_angle_mode() == "Free"
        area.set_angle_mode("45°")
        assert area.controller.get_angle_mode() == "45°"

    def test_add_tube_button_places_at_viewport_center(self, area):
        area.bottom_bar.add_tube_btn.click()
        tubes = area.controller.scene.tubes
        assert len(tubes) == 1
        center = area.canvas_widget.viewport_center()
        assert (tubes[0].x, tubes[0].y) == (center.x, center.y)
        assert (tubes[0].length, tubes[0].width, tubes[0].thickness) == (200, 50, 5)

    def test_undo_button_follows_history(self, area):
        assert not area.bottom_bar.undo_btn.isEnabled()
        area.bottom_bar.add_tube_btn.click()
        assert area.bottom_bar.undo_btn.isEnabled()
        area.bottom_bar.undo_btn.click()
        assert area.controller.scene.get_tube_count() == 0
        assert not area.bottom_bar.undo_btn.isEnabled()

    def test_picking_preset_rotates_selected_tube(self, area):
        area.add_tube()
        area.bottom_bar.angle_combo.activated[str].emit("90°")
        assert area.controller.selected_tube.rotation == pytest.approx(math.pi / 2)
        assert area.get_angle_mode() == "90°"

    def test_set_angle_mode_does_not_rotate(self, area):
        tube = area.add_tube()
        area.set_angle_mode("90°")
        assert tube.rotation == 0

    def test_picking_free_changes_nothing(self, area):
        tube = area.add_tube()
        before = len(area.controller.history)
        assert not area.apply_angle_mode("Free")
        assert tube.rotation == 0
        assert len(area.controller.history) == before

"""Tests for the editor widgets, run on the offscreen platform."""

import pytest

from PySide6 import QtCore, QtGui

from quiltdesigner.components.model import QuiltModel
from quiltdesigner.constants.quilt import PX_SCALE, TOP_MARGIN
from quiltdesigner.engine import Half, TriangleId, PatternState, triangle_polygons

RED = "#ff0000"


@pytest.fixture
def model(widgets_app):
    return QuiltModel("Twin", 3)


@pytest.fixture
def main(model):
    from quiltdesigner.components.main import Main

    widget = Main(model, RED)
    yield widget
    widget.deleteLater()


def center_of(main, tid):
    """Scene point at the centroid of a triangle."""
    grid = main.model.grid_dimensions()
    right, left = triangle_polygons(tid.row, tid.col, grid.triangle_height, grid.triangle_side,
                                    scale=PX_SCALE, top=TOP_MARGIN)
    points = right if tid.half is Half.RIGHT else left
    return QtCore.QPointF(sum(x for x, _ in points) / 3, sum(y for _, y in points) / 3)


class TestStrokes:
    """Tests for stroke handling in Main."""

    def test_drag_commits_once(self, main, model):
        """Test a drag over several triangles makes one history entry."""
        tids = [TriangleId(2, 2, Half.RIGHT), TriangleId(2, 2, Half.LEFT), TriangleId(3, 2, Half.RIGHT)]
        main.editor.strokeStarted.emit(center_of(main, tids[0]))
        for tid in tids[1:]:
            main.editor.strokeMoved.emit(center_of(main, tid))

        assert all(model.effective_color(tid) == RED for tid in tids)
        assert not model.can_undo()

        main.editor.strokeFinished.emit()
        assert model.can_undo()
        assert main.undo_action.isEnabled()

        model.undo()
        assert model.pattern() == PatternState()
        assert not model.can_undo()

    def test_click_outside_grid(self, main, model):
        """Test a stroke that touches no triangle commits nothing."""
        main.editor.strokeStarted.emit(QtCore.QPointF(-500, -500))
        main.editor.strokeFinished.emit()
        assert not model.can_undo()

    def test_bucket_stroke(self, main, model):
        """Test a bucket click fills and commits once."""
        tid = TriangleId(0, 1, Half.RIGHT)
        main._set_tool(main.BUCKET)
        main.editor.strokeStarted.emit(center_of(main, tid))
        main.editor.strokeFinished.emit()
        assert model.effective_color(tid) == RED
        assert model.can_undo()
        model.undo()
        assert not model.can_undo()

    def test_items_follow_model(self, main, model):
        """Test triangle items repaint when the model changes."""
        tid = TriangleId(1, 1, Half.LEFT)
        model.paint(tid, RED)
        assert main.triangle_items[tid].brush().color() == QtGui.QColor(RED)


class TestEditorView:
    """Tests for EditorView pointer handling."""

    def _press(self, view, button):
        pos = QtCore.QPointF(5, 5)
        view.mousePressEvent(QtGui.QMouseEvent(QtCore.QEvent.MouseButtonPress, pos, pos,
                                               button, button, QtCore.Qt.NoModifier))

    def test_leave_ends_pan(self, main):
        """Test leaving the view mid-pan restores the cursor."""
        view = main.editor
        self._press(view, QtCore.Qt.MiddleButton)
        assert view.viewport().testAttribute(QtCore.Qt.WA_SetCursor)

        view.leaveEvent(QtCore.QEvent(QtCore.QEvent.Leave))
        assert not view.viewport().testAttribute(QtCore.Qt.WA_SetCursor)

    def test_leave_ends_stroke(self, main, model):
        """Test leaving the view mid-stroke commits the stroke."""
        view = main.editor
        finished = []
        view.strokeFinished.connect(lambda: finished.append(True))
        self._press(view, QtCore.Qt.LeftButton)
        view.leaveEvent(QtCore.QEvent(QtCore.QEvent.Leave))
        assert finished == [True]

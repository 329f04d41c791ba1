from PySide6 import QtCore, QtGui, QtWidgets

from ..constants.quilt import ZOOM_MIN, ZOOM_MAX, ZOOM_STEP

class EditorView(QtWidgets.QGraphicsView):
    # left button stroke, in scene coordinates
    strokeStarted = QtCore.Signal(QtCore.QPointF)
    strokeMoved = QtCore.Signal(QtCore.QPointF)
    strokeFinished = QtCore.Signal()

    PAN_BUTTONS = (QtCore.Qt.MiddleButton, QtCore.Qt.RightButton)

    def __init__(self, scene):
        super().__init__(scene)
        self.setRenderHints(QtGui.QPainter.Antialiasing)
        self.setDragMode(QtWidgets.QGraphicsView.NoDrag)
        self.setViewportUpdateMode(QtWidgets.QGraphicsView.FullViewportUpdate)
        self.setTransformationAnchor(QtWidgets.QGraphicsView.AnchorUnderMouse)
        self.setContextMenuPolicy(QtCore.Qt.NoContextMenu)

        self._zoom = 1.0
        self._drawing = False
        self._panning = False
        self._last_pan = QtCore.QPoint()

    # ---- zoom ----
    def set_zoom(self, zoom: float):
        zoom = max(ZOOM_MIN, min(ZOOM_MAX, zoom))
        if zoom == self._zoom:
            return
        self.scale(zoom / self._zoom, zoom / self._zoom)
        self._zoom = zoom

    def zoom_in(self):
        self.set_zoom(self._zoom * ZOOM_STEP)

    def zoom_out(self):
        self.set_zoom(self._zoom / ZOOM_STEP)

    def reset_zoom(self):
        self.resetTransform()
        self._zoom = 1.0
        self.centerOn(self.sceneRect().center())

    def wheelEvent(self, e):
        if not e.modifiers() & (QtCore.Qt.ControlModifier | QtCore.Qt.MetaModifier):
            super().wheelEvent(e)  # plain wheel scrolls
            return
        if e.angleDelta().y() == 0:
            return
        self.set_zoom(self._zoom * (1 + e.angleDelta().y() / 120 * 0.1))

    # ---- strokes & panning ----
    def _scene_pos(self, e) -> QtCore.QPointF:
        return self.mapToScene(e.position().toPoint())

    def mousePressEvent(self, e):
        if e.button() in self.PAN_BUTTONS:
            self._panning = True
            self._last_pan = e.position().toPoint()
            self.viewport().setCursor(QtCore.Qt.ClosedHandCursor)
            return
        if e.button() == QtCore.Qt.LeftButton and not self._panning:
            self._drawing = True
            self.strokeStarted.emit(self._scene_pos(e))
            return
        super().mousePressEvent(e)

    def mouseMoveEvent(self, e):
        if self._panning:
            pos = e.position().toPoint()
            delta = pos - self._last_pan
            self._last_pan = pos
            self.horizontalScrollBar().setValue(self.horizontalScrollBar().value() - delta.x())
            self.verticalScrollBar().setValue(self.verticalScrollBar().value() - delta.y())
            return
        if self._drawing:
            self.strokeMoved.emit(self._scene_pos(e))
        super().mouseMoveEvent(e)

    def mouseReleaseEvent(self, e):
        if e.button() in self.PAN_BUTTONS and self._panning:
            self._panning = False
            self.viewport().unsetCursor()
            return
        if e.button() == QtCore.Qt.LeftButton and self._drawing:
            self._finish_stroke()
            return
        super().mouseReleaseEvent(e)

    def leaveEvent(self, e):
        # leaving the canvas ends a stroke like a release would
        if self._panning:
            self._panning = False
            self.viewport().unsetCursor()
        if self._drawing:
            self._finish_stroke()
        super().leaveEvent(e)

    def _finish_stroke(self):
        self._drawing = False
        self.strokeFinished.emit()

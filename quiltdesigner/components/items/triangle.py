from ...engine import TriangleId
from ...utility import outline_for

from PySide6 import QtCore, QtGui, QtWidgets

class TriangleItem(QtWidgets.QGraphicsPolygonItem):
    def __init__(self, tid: TriangleId, vertices: list[tuple[float, float]], color: str):
        super().__init__(QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in vertices]))
        self.tid = tid
        self._hovered = False

        self.setZValue(1)
        self.setAcceptHoverEvents(True)
        self.set_color(color)

    def set_color(self, color: str):
        self._color = QtGui.QColor(color)
        self.setBrush(QtGui.QBrush(self._color))
        self._apply_pen()

    def _apply_pen(self):
        # fill and stroke match so neighboring triangles show no seam
        pen = QtGui.QPen(outline_for(self._color) if self._hovered else self._color, 1)
        pen.setCosmetic(True)
        pen.setJoinStyle(QtCore.Qt.MiterJoin)
        self.setPen(pen)
        self.setZValue(2 if self._hovered else 1)

    def hoverEnterEvent(self, e):
        self._hovered = True
        self._apply_pen()
        super().hoverEnterEvent(e)

    def hoverLeaveEvent(self, e):
        self._hovered = False
        self._apply_pen()
        super().hoverLeaveEvent(e)

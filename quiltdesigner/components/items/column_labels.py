from PySide6 import QtCore, QtGui, QtWidgets
from ...utility import darklight_from_lightcolor

class ColumnLabels(QtWidgets.QGraphicsItem):
    '''
    Column numbers (1-based) printed above the quilt, so a printed pattern can
    be followed strip by strip.
    '''

    def __init__(self, columns: int, column_width: float, baseline: float = -10):
        super().__init__()

        self.columns = columns
        self.column_width = column_width
        self.baseline = baseline

        self.setZValue(0.5)
        self.setAcceptedMouseButtons(QtCore.Qt.NoButton)

    def boundingRect(self):
        return QtCore.QRectF(0, self.baseline - 14, self.columns * self.column_width, 18)

    def paint(self, p, opt, w):
        if self.column_width < 1:
            return # Labels would overlap.

        font = QtGui.QFont(p.font())
        font.setPixelSize(12)
        p.setFont(font)
        p.setPen(darklight_from_lightcolor(20, 20, 20))

        for i in range(self.columns):
            rect = QtCore.QRectF(i * self.column_width, self.baseline - 14, self.column_width, 16)
            p.drawText(rect, QtCore.Qt.AlignHCenter | QtCore.Qt.AlignBottom, str(i + 1))

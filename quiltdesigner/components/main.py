import logging

from .model import QuiltModel
from .editor_view import EditorView
from .items import TriangleItem
from .items import ColumnLabels

from PySide6 import QtCore, QtGui, QtWidgets

from ..constants.quilt import QUILT_SIZES, TRIANGLE_SIZES, PX_SCALE, TOP_MARGIN
from ..engine import Half, TriangleId, triangle_polygons
from ..utility import darklight_from_lightcolor

logger = logging.getLogger(__name__)

class Main(QtWidgets.QWidget):
    PENCIL = 'pencil'
    BUCKET = 'bucket'

    def __init__(self, model: QuiltModel, paint_color: str):
        super().__init__()
        self.setWindowTitle("Quilt Pattern Designer")

        self.model = model
        self.paint_color = paint_color
        self.tool = self.PENCIL

        # stroke state
        self._last_tid: TriangleId | None = None

        # Scene & view
        self.scene = QtWidgets.QGraphicsScene()
        self.scene.setBackgroundBrush(darklight_from_lightcolor(243, 244, 246))
        self.triangle_items: dict[TriangleId, TriangleItem] = {}

        self.editor = EditorView(self.scene)
        self.editor.strokeStarted.connect(self._on_stroke_started)
        self.editor.strokeMoved.connect(self._on_stroke_moved)
        self.editor.strokeFinished.connect(self._on_stroke_finished)

        # Toolbar + size pickers
        toolbar = self._make_toolbar()
        pickers = self._make_size_pickers()

        self.size_label = QtWidgets.QLabel()
        self.size_label.setAlignment(QtCore.Qt.AlignCenter)
        self.formula_label = QtWidgets.QLabel()
        self.formula_label.setAlignment(QtCore.Qt.AlignCenter)

        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(toolbar)
        layout.addLayout(pickers)
        layout.addWidget(self.size_label)
        layout.addWidget(self.formula_label)
        layout.addWidget(self.editor, 1)

        self.model.changed.connect(self._refresh_colors)
        self.model.gridChanged.connect(self._on_grid_changed)
        self.model.historyChanged.connect(self._update_history_actions)

        self._on_grid_changed()
        self._update_history_actions()

    # ---- toolbar ----
    def _make_toolbar(self):
        bar = QtWidgets.QToolBar()

        self.color_button = QtWidgets.QToolButton()
        self.color_button.setToolTip("Paint Color")
        self.color_button.clicked.connect(self._pick_color)
        self._update_color_button()
        bar.addWidget(self.color_button)
        bar.addSeparator()

        # Tools are exclusive: exactly one of pencil / bucket is active
        tools = QtGui.QActionGroup(bar)
        tools.setExclusive(True)

        pencil = QtGui.QAction("Pencil", tools)
        pencil.setCheckable(True)
        pencil.setChecked(True)
        pencil.setToolTip("Pencil: click and drag to color triangles")

        bucket = QtGui.QAction("Bucket", tools)
        bucket.setCheckable(True)
        bucket.setToolTip("Bucket: fill connected triangles of the same color")

        pencil.triggered.connect(lambda: self._set_tool(self.PENCIL))
        bucket.triggered.connect(lambda: self._set_tool(self.BUCKET))

        self.undo_action = QtGui.QAction("Undo", bar)
        self.undo_action.setIcon(self.style().standardIcon(QtWidgets.QStyle.SP_ArrowBack))
        self.undo_action.setShortcut(QtGui.QKeySequence(QtGui.QKeySequence.Undo))
        self.undo_action.triggered.connect(self.model.undo)

        self.redo_action = QtGui.QAction("Redo", bar)
        self.redo_action.setIcon(self.style().standardIcon(QtWidgets.QStyle.SP_ArrowForward))
        self.redo_action.setShortcut(QtGui.QKeySequence("Ctrl+Shift+Z"))
        self.redo_action.triggered.connect(self.model.redo)

        zoom_in = QtGui.QAction("Zoom In", bar)
        zoom_out = QtGui.QAction("Zoom Out", bar)
        reset_view = QtGui.QAction(bar)
        reset_view.setIcon(self.style().standardIcon(QtWidgets.QStyle.SP_BrowserReload))
        reset_view.setToolTip("Reset View")

        zoom_in.triggered.connect(self.editor.zoom_in)
        zoom_out.triggered.connect(self.editor.zoom_out)
        reset_view.triggered.connect(self.editor.reset_zoom)

        bar.addAction(pencil)
        bar.addAction(bucket)
        bar.addSeparator()
        bar.addAction(self.undo_action)
        bar.addAction(self.redo_action)
        bar.addSeparator()
        bar.addAction(zoom_in)
        bar.addAction(zoom_out)
        bar.addAction(reset_view)
        return bar

    def _make_size_pickers(self):
        row = QtWidgets.QHBoxLayout()

        self.size_combo = QtWidgets.QComboBox()
        for name, (width, height) in QUILT_SIZES.items():
            self.size_combo.addItem(f'{name} ({width}" × {height}")', name)
        self.size_combo.setCurrentIndex(self.size_combo.findData(self.model.size_name()))
        self.size_combo.currentIndexChanged.connect(
            lambda i: self.model.set_quilt_size(self.size_combo.itemData(i)))

        self.height_combo = QtWidgets.QComboBox()
        for size in TRIANGLE_SIZES:
            self.height_combo.addItem(f'{size:.1f}"', size)
        self.height_combo.setCurrentIndex(self.height_combo.findData(self.model.triangle_height()))
        self.height_combo.currentIndexChanged.connect(
            lambda i: self.model.set_triangle_height(self.height_combo.itemData(i)))

        row.addStretch(1)
        row.addWidget(QtWidgets.QLabel("Quilt Size"))
        row.addWidget(self.size_combo)
        row.addSpacing(16)
        row.addWidget(QtWidgets.QLabel("Triangle Size (inches)"))
        row.addWidget(self.height_combo)
        row.addStretch(1)
        return row

    def _set_tool(self, tool: str):
        self.tool = tool
        logger.debug("Tool: %s", tool)

    def _pick_color(self):
        color = QtWidgets.QColorDialog.getColor(QtGui.QColor(self.paint_color), self, "Paint Color")
        if color.isValid():
            self.paint_color = color.name()
            self._update_color_button()

    def _update_color_button(self):
        pm = QtGui.QPixmap(24, 24)
        pm.fill(QtGui.QColor(self.paint_color))
        self.color_button.setIcon(QtGui.QIcon(pm))

    def _update_history_actions(self):
        self.undo_action.setEnabled(self.model.can_undo())
        self.redo_action.setEnabled(self.model.can_redo())

    # ---- scene ----
    def _on_grid_changed(self):
        # keep the pickers in step when a loaded design switches the grid
        for combo, value in ((self.size_combo, self.model.size_name()),
                             (self.height_combo, self.model.triangle_height())):
            index = combo.findData(value)
            if index >= 0 and index != combo.currentIndex():
                combo.blockSignals(True)
                combo.setCurrentIndex(index)
                combo.blockSignals(False)

        self._rebuild_scene()
        self._update_size_labels()

    def _rebuild_scene(self):
        self.scene.clear()
        self.triangle_items.clear()

        grid = self.model.grid_dimensions()
        column_px = grid.triangle_height * PX_SCALE
        side_px = grid.triangle_side * PX_SCALE

        # labels sit just above the raised even columns
        self.scene.addItem(ColumnLabels(grid.columns, column_px, baseline=TOP_MARGIN - side_px / 2 - 4))

        for tid in self.model.triangle_ids():
            right, left = triangle_polygons(tid.row, tid.col, grid.triangle_height, grid.triangle_side,
                                            scale=PX_SCALE, top=TOP_MARGIN)
            vertices = right if tid.half is Half.RIGHT else left
            item = TriangleItem(tid, vertices, self.model.effective_color(tid))
            self.scene.addItem(item)
            self.triangle_items[tid] = item

        width, height = self.model.actual_size()
        self.scene.setSceneRect(0, -side_px, width * PX_SCALE, height * PX_SCALE + side_px + 30)

    def _refresh_colors(self):
        for tid, item in self.triangle_items.items():
            item.set_color(self.model.effective_color(tid))

    def _update_size_labels(self):
        grid = self.model.grid_dimensions()
        width, height = self.model.actual_size()
        text = f'Actual quilt size: <b>{width:.2f}" × {height:.2f}"</b>'
        if self.model.is_adjusted():
            text += " (adjusted to fit triangle pattern)"
        self.size_label.setText(text)
        self.formula_label.setText(
            f'({grid.columns} * {grid.triangle_height:g}") x ({grid.rows} * {grid.triangle_side:g}")')

    # ---- strokes ----
    def _triangle_at(self, scene_pt: QtCore.QPointF) -> TriangleId | None:
        for item in self.scene.items(scene_pt):
            if isinstance(item, TriangleItem):
                return item.tid
        return None

    def _apply_tool(self, scene_pt: QtCore.QPointF):
        tid = self._triangle_at(scene_pt)
        if tid is None or tid == self._last_tid:
            return
        self._last_tid = tid
        if self.tool == self.BUCKET:
            self.model.fill(tid, self.paint_color)
        else:
            self.model.paint(tid, self.paint_color)

    def _on_stroke_started(self, scene_pt: QtCore.QPointF):
        self._last_tid = None
        self._apply_tool(scene_pt)

    def _on_stroke_moved(self, scene_pt: QtCore.QPointF):
        self._apply_tool(scene_pt)

    def _on_stroke_finished(self):
        # one history entry per stroke, holding whatever the stroke left behind
        self._last_tid = None
        self.model.commit()

    def render_quilt(self, painter: QtGui.QPainter):
        self.scene.render(painter, QtCore.QRectF(), self.scene.sceneRect(), QtCore.Qt.KeepAspectRatio)

import logging

from PySide6 import QtCore

from ..constants.quilt import QUILT_SIZES, DEFAULT_QUILT_SIZE, DEFAULT_TRIANGLE_HEIGHT
from ..engine import (
    GridDimensions, GridParams, History, PatternState, TriangleId,
    actual_size, compute_grid, flood_fill, is_adjusted, iter_triangle_ids,
)

logger = logging.getLogger(__name__)


def _grid_for(size_name: str, triangle_height: float) -> GridDimensions:
    if size_name not in QUILT_SIZES:
        raise KeyError(f"unknown quilt size {size_name!r}")
    if triangle_height <= 0:
        raise ValueError(f"triangle height must be positive, got {triangle_height}")
    width, height = QUILT_SIZES[size_name]
    return compute_grid(width, height, triangle_height)


class QuiltModel(QtCore.QObject):
    changed = QtCore.Signal()         # live pattern edited or replaced
    gridChanged = QtCore.Signal()     # quilt size / triangle height changed
    historyChanged = QtCore.Signal()  # undo/redo availability may differ

    def __init__(self, size_name: str = DEFAULT_QUILT_SIZE, triangle_height: float = DEFAULT_TRIANGLE_HEIGHT):
        super().__init__()
        self._grid = _grid_for(size_name, triangle_height)
        self._size_name = size_name
        self._triangle_height = float(triangle_height)

        self._pattern = PatternState()
        self._history = History(self._pattern)

    # grid
    def size_name(self) -> str:
        return self._size_name

    def triangle_height(self) -> float:
        return self._triangle_height

    def grid_dimensions(self) -> GridDimensions:
        return self._grid

    def actual_size(self) -> tuple[float, float]:
        return actual_size(self._grid)

    def is_adjusted(self) -> bool:
        return is_adjusted(self._grid, *QUILT_SIZES[self._size_name])

    def grid_params(self) -> GridParams:
        return GridParams(self._size_name, self._triangle_height, self._grid.columns, self._grid.rows)

    def triangle_ids(self):
        return iter_triangle_ids(self._grid)

    def set_quilt_size(self, size_name: str):
        grid = _grid_for(size_name, self._triangle_height)
        if size_name == self._size_name:
            return
        self._size_name = size_name
        self._update_grid(grid)

    def set_triangle_height(self, triangle_height: float):
        grid = _grid_for(self._size_name, triangle_height)
        if triangle_height == self._triangle_height:
            return
        self._triangle_height = float(triangle_height)
        self._update_grid(grid)

    def _update_grid(self, grid: GridDimensions):
        self._grid = grid
        logger.info("Grid is now %d columns x %d rows (%s, %.1f\" triangles)",
                    self._grid.columns, self._grid.rows, self._size_name, self._triangle_height)
        self.gridChanged.emit()

    # pattern
    def pattern(self) -> PatternState:
        return self._pattern

    def effective_color(self, tid: TriangleId) -> str:
        return self._pattern.get(tid)

    def paint(self, tid: TriangleId, color: str):
        new_state = self._pattern.set(tid, color)
        if new_state is self._pattern:
            return
        self._pattern = new_state
        self.changed.emit()

    def fill(self, tid: TriangleId, color: str):
        new_state = flood_fill(self._pattern, tid, color)
        if new_state is self._pattern:
            return
        self._pattern = new_state
        self.changed.emit()

    # history
    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def commit(self) -> bool:
        '''
        Close one edit unit: push the live pattern onto the history.

        Called once per pointer stroke, after every paint of the stroke has
        been applied. Nothing is pushed if the stroke left the pattern as it
        was.
        '''
        if self._pattern == self._history.current:
            return False
        self._history.commit(self._pattern)
        self.historyChanged.emit()
        return True

    def undo(self):
        self._restore(self._history.undo())

    def redo(self):
        self._restore(self._history.redo())

    def _restore(self, state: PatternState):
        self.historyChanged.emit()
        if state is self._pattern:
            return
        self._pattern = state
        self.changed.emit()

    def load_state(self, pattern: PatternState, params: GridParams):
        """Replace the pattern and grid with a stored design. The load can be undone."""
        grid = _grid_for(params.size_name, params.triangle_height)

        grid_changed = (params.size_name, float(params.triangle_height)) != (self._size_name, self._triangle_height)
        self._size_name = params.size_name
        self._triangle_height = float(params.triangle_height)
        self._grid = grid

        if (params.columns, params.rows) != (self._grid.columns, self._grid.rows):
            logger.warning("Stored grid %dx%d differs from computed %dx%d, using computed",
                           params.columns, params.rows, self._grid.columns, self._grid.rows)

        self._pattern = pattern
        self._history.commit(pattern)

        if grid_changed:
            self.gridChanged.emit()
        self.changed.emit()
        self.historyChanged.emit()

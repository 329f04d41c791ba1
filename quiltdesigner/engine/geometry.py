"""
Grid geometry for the zig-zag half-triangle tiling.

Converts quilt dimensions and a triangle height into a column/row count,
places each half-triangle in scene coordinates and defines which triangles
touch each other.
"""

from dataclasses import dataclass
import math

from ..constants.quilt import TRIANGLE_HEIGHT_TO_SIDE_RATIO
from .triangle_id import Half, TriangleId


@dataclass(frozen=True)
class GridDimensions:
    """Derived grid size. Always computed, never stored on its own."""
    columns: int
    rows: int
    triangle_height: float
    triangle_side: float

    def contains(self, tid: TriangleId) -> bool:
        return 0 <= tid.row < self.rows and 0 <= tid.col < self.columns


@dataclass(frozen=True)
class GridParams:
    """Grid inputs stored with a design."""
    size_name: str
    triangle_height: float
    columns: int
    rows: int


def triangle_side_for(triangle_height: float) -> float:
    return triangle_height * TRIANGLE_HEIGHT_TO_SIDE_RATIO


def compute_grid(quilt_width: float, quilt_height: float, triangle_height: float) -> GridDimensions:
    """
    Fit whole triangles over a quilt of the given nominal size.

    Args:
        quilt_width: Nominal quilt width
        quilt_height: Nominal quilt height
        triangle_height: Height of one triangle (the column width), > 0

    Returns:
        GridDimensions. A zero width or height gives zero columns or rows.
    """
    triangle_side = triangle_side_for(triangle_height)
    columns = math.ceil(quilt_width / triangle_height)
    rows = math.ceil(quilt_height / triangle_side)
    return GridDimensions(columns, rows, triangle_height, triangle_side)


def actual_size(dims: GridDimensions) -> tuple[float, float]:
    """Realized quilt size, which may exceed the requested one."""
    return (dims.columns * dims.triangle_height, dims.rows * dims.triangle_side)


def is_adjusted(dims: GridDimensions, quilt_width: float, quilt_height: float) -> bool:
    width, height = actual_size(dims)
    return not (math.isclose(width, quilt_width) and math.isclose(height, quilt_height))


def neighbors_of(tid: TriangleId) -> tuple[TriangleId, TriangleId, TriangleId]:
    """
    The three triangles sharing an edge with ``tid``.

    A RIGHT triangle touches the LEFT half of its own cell, of the cell above
    and of the cell to the right; a LEFT triangle is the mirror. The returned
    ids are candidates only: they may lie outside the grid.
    """
    row, col = tid.row, tid.col
    if tid.half is Half.RIGHT:
        return (
            TriangleId(row, col, Half.LEFT),
            TriangleId(row - 1, col, Half.LEFT),
            TriangleId(row, col + 1, Half.LEFT),
        )
    return (
        TriangleId(row, col, Half.RIGHT),
        TriangleId(row + 1, col, Half.RIGHT),
        TriangleId(row, col - 1, Half.RIGHT),
    )


def triangle_polygons(row: int, col: int, triangle_height: float, triangle_side: float,
                      scale: float = 1.0, top: float = 0.0):
    """
    Vertices of the RIGHT and LEFT halves of cell (row, col).

    Even columns are shifted up by half a triangle side against odd columns;
    this stagger is what makes neighboring columns interlock.

    Returns:
        (right_vertices, left_vertices), each a list of three (x, y) tuples
    """
    w = triangle_height * scale
    s = triangle_side * scale
    stagger = s / 2 if col % 2 == 0 else 0

    x = col * w
    y = top + row * s - stagger
    y2 = top + row * s - (s / 2) + stagger

    right = [(x, y), (x + w, y + s / 2), (x, y + s)]
    left = [(x + w, y2), (x + w, y2 + s), (x, y2 + s / 2)]
    return right, left


def iter_triangle_ids(dims: GridDimensions):
    """All on-grid ids, column by column."""
    for col in range(dims.columns):
        for row in range(dims.rows):
            yield TriangleId(row, col, Half.RIGHT)
            yield TriangleId(row, col, Half.LEFT)

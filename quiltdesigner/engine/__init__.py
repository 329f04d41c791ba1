# Triangle-grid pattern engine. Plain Python, no Qt.

from .triangle_id import Half, TriangleId, ParseError, format_triangle_id, parse_triangle_id
from .geometry import (
    GridDimensions,
    GridParams,
    compute_grid,
    actual_size,
    is_adjusted,
    neighbors_of,
    triangle_polygons,
    iter_triangle_ids,
)
from .pattern import PatternState, default_color
from .fill import flood_fill
from .history import History

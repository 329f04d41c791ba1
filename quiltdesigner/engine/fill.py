"""
Flood fill over the half-triangle adjacency.
"""

import logging
from typing import Optional

from .geometry import GridDimensions, neighbors_of
from .pattern import DEFAULT_COLORS, PatternState
from .triangle_id import TriangleId

logger = logging.getLogger(__name__)


def flood_fill(state: PatternState, start: TriangleId, new_color: str,
               bounds: Optional[GridDimensions] = None) -> PatternState:
    """
    Recolor the connected region of ``start``'s current color.

    Uses a work stack against the evolving result: a triangle is recolored
    when popped, and only neighbors whose effective color in the result
    still equals the target color are pushed. Since the target differs from
    ``new_color``, this is the same region a fill over the original colors
    would give, and the visiting order does not change the outcome.

    Off-grid ids are filled like any other id unless ``bounds`` is given,
    in which case traversal stays inside the grid.

    Args:
        state: Pattern to fill
        start: Triangle the fill starts from
        new_color: Replacement color
        bounds: Optional grid to confine the fill to

    Returns:
        A new PatternState, or ``state`` itself when nothing changes
    """
    target = state.get(start)
    if target == new_color:
        return state
    if bounds is not None and not bounds.contains(start):
        return state

    colors = state.assigned()

    def current(tid: TriangleId) -> str:
        return colors.get(tid, DEFAULT_COLORS[tid.half])

    stack = [start]
    filled = 0
    while stack:
        tid = stack.pop()
        if current(tid) == new_color:
            continue

        colors[tid] = new_color
        filled += 1

        for neighbor in neighbors_of(tid):
            if bounds is not None and not bounds.contains(neighbor):
                continue
            if current(neighbor) == target:
                stack.append(neighbor)

    logger.debug("Filled %d triangle(s) from %s: %s -> %s", filled, start, target, new_color)
    return PatternState(colors)

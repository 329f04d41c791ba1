"""
Pattern state: which color each half-triangle is painted.

Assignment is sparse. An id missing from the mapping is unpainted and shows
the default color of its half, so "absent" is a normal state, not an error.
"""

from typing import Iterator, Mapping, Optional

from ..constants.quilt import DEFAULT_LEFT_COLOR, DEFAULT_RIGHT_COLOR
from .triangle_id import Half, TriangleId, format_triangle_id, parse_triangle_id

DEFAULT_COLORS = {
    Half.RIGHT: DEFAULT_RIGHT_COLOR,
    Half.LEFT: DEFAULT_LEFT_COLOR,
}


def default_color(half: Half) -> str:
    return DEFAULT_COLORS[half]


class PatternState:
    """
    Immutable mapping of TriangleId -> color.

    ``set`` returns a new state and leaves this one untouched, so a state
    handed to the history can never change afterwards.
    """

    __slots__ = ('_colors',)

    def __init__(self, colors: Optional[Mapping[TriangleId, str]] = None):
        self._colors: dict[TriangleId, str] = dict(colors) if colors else {}

    # lookups
    def get(self, tid: TriangleId) -> str:
        return self._colors.get(tid, DEFAULT_COLORS[tid.half])

    effective_color = get

    def assigned(self) -> dict[TriangleId, str]:
        return dict(self._colors)

    # edits
    def set(self, tid: TriangleId, color: str) -> 'PatternState':
        if self._colors.get(tid) == color:
            return self
        colors = dict(self._colors)
        colors[tid] = color
        return PatternState(colors)

    # text-keyed form used by stored designs
    def to_dict(self) -> dict[str, str]:
        return {format_triangle_id(tid): color for tid, color in self._colors.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> 'PatternState':
        return cls({parse_triangle_id(key): color for key, color in data.items()})

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[TriangleId]:
        return iter(self._colors)

    def __contains__(self, tid) -> bool:
        return tid in self._colors

    def __eq__(self, other) -> bool:
        if not isinstance(other, PatternState):
            return NotImplemented
        return self._colors == other._colors

    __hash__ = None

    def __repr__(self) -> str:
        return f"PatternState({len(self._colors)} painted)"

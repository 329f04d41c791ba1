"""
Triangle identity.

Every grid cell (row, col) is split by a diagonal into a RIGHT and a LEFT
half-triangle. A half-triangle is addressed by the value ``TriangleId`` and,
when it has to be stored or matched against rendered shapes, by the text form
``triangle-{row}-{col}-{right|left}``.
"""

from dataclasses import dataclass
from enum import Enum
import re


class ParseError(ValueError):
    """Raised when a string is not a valid triangle id."""


class Half(Enum):
    RIGHT = 'right'
    LEFT = 'left'


@dataclass(frozen=True)
class TriangleId:
    """
    One half-triangle of the grid.

    row and col are not clamped to the grid: neighbor derivation freely
    produces ids at row -1 or past the last column.
    """
    row: int
    col: int
    half: Half

    def __str__(self) -> str:
        return format_triangle_id(self)


# row/col may be negative, hence the optional sign after the separator
_ID_PATTERN = re.compile(r'triangle-(-?[0-9]+)-(-?[0-9]+)-(right|left)')


def format_triangle_id(tid: TriangleId) -> str:
    return f"triangle-{tid.row}-{tid.col}-{tid.half.value}"


def parse_triangle_id(text: str) -> TriangleId:
    '''
    Parse ``triangle-{row}-{col}-{right|left}`` into a TriangleId.

    I.e: "triangle-3-12-left" gives TriangleId(3, 12, Half.LEFT), and
    "triangle--1-0-right" gives TriangleId(-1, 0, Half.RIGHT).
    '''
    if not isinstance(text, str):
        raise ParseError(f"triangle id must be a string, got {type(text).__name__}")

    match = _ID_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"not a triangle id: {text!r}")

    row, col, half = match.groups()
    return TriangleId(int(row), int(col), Half(half))

"""
Cells and coordinate arithmetic for the sparse Game of Life grid.

The grid is unbounded in both directions, but coordinate 0 does not exist:
each axis runs ..., -2, -1, 1, 2, ... This module is the only place that
knows about the gap. Every step along an axis and every walk over an axis
range goes through `step_up`, `step_down` or `axis_values`.

Cells are identified inside a World by their cell id, the string "{x,y}".
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Iterator, Tuple, Union
import re


_CELL_ID_RE = re.compile(r"^\{(-?\d+),(-?\d+)\}$")


class InvalidCellError(ValueError):
    """Raised when a cell has a zero coordinate or a cell id is malformed."""


@dataclass(frozen=True, order=True)
class Cell:
    """
    A grid position (x, y).

    Attributes:
        x: X-axis coordinate (..., -1, 1, ...)
        y: Y-axis coordinate (..., -1, 1, ...), grows upwards
    """
    x: int
    y: int

    def __post_init__(self):
        for axis in ("x", "y"):
            value = getattr(self, axis)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Cell {axis} must be an integer, got {value!r}")
            if value == 0:
                raise InvalidCellError(f"Cell coordinates cannot be 0, got ({self.x}, {self.y})")
            object.__setattr__(self, axis, int(value))

    @classmethod
    def of(cls, value: CellLike) -> "Cell":
        """Coerce a Cell or an (x, y) pair to a Cell."""
        if isinstance(value, Cell):
            return value
        x, y = value
        return cls(x, y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Cell({self.x}, {self.y})"


CellLike = Union[Cell, Tuple[int, int]]


def step_up(value: int) -> int:
    """Next coordinate towards +infinity."""
    return value + 1 or 1


def step_down(value: int) -> int:
    """Next coordinate towards -infinity."""
    return value - 1 or -1


def axis_values(lo: int, hi: int) -> Iterator[int]:
    """Coordinates from lo to hi inclusive, without 0."""
    for value in range(lo, hi + 1):
        if value != 0:
            yield value


def cell_id(cell: CellLike) -> str:
    """Encode a cell as its id, e.g. Cell(-3, 12) -> "{-3,12}"."""
    x, y = cell
    return f"{{{x},{y}}}"


def parse_cell_id(text: str) -> Cell:
    """
    Decode a cell id produced by `cell_id`.

    Raises:
        InvalidCellError: If the id is malformed or has a zero coordinate
    """
    match = _CELL_ID_RE.match(text)
    if match is None:
        raise InvalidCellError(f"Malformed cell id: {text!r}")
    return Cell(int(match.group(1)), int(match.group(2)))

"""
Eight-cell neighbourhood on the zero-less grid.
"""

from __future__ import annotations
from typing import List

from .cells import Cell, CellLike, step_down, step_up


NEIGHBOUR_ORDER = (
    "top_left",
    "top",
    "top_right",
    "right",
    "bottom_right",
    "bottom",
    "bottom_left",
    "left",
)


def neighbours(cell: CellLike) -> List[Cell]:
    """
    The eight cells around `cell`.

    Order is fixed (see NEIGHBOUR_ORDER): top-left, top, top-right, right,
    bottom-right, bottom, bottom-left, left. "Top" is y + 1. The engine pushes
    neighbours onto its work list in this order.

    Example:
        neighbours(Cell(1, 1))[0]  # Cell(-1, 2)
    """
    x, y = cell
    left, right = step_down(x), step_up(x)
    bottom, top = step_down(y), step_up(y)
    return [
        Cell(left, top),
        Cell(x, top),
        Cell(right, top),
        Cell(right, y),
        Cell(right, bottom),
        Cell(x, bottom),
        Cell(left, bottom),
        Cell(left, y),
    ]

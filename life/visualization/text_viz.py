"""
Text rendering of a World.

The window is the World's bounding box. Rows run from the top (largest y)
down, columns from left (smallest x) to right; coordinate 0 has no row or
column.

    " |X| "
    " | |X"     <- glider, default characters
    "X|X|X"
"""

from __future__ import annotations
from typing import Optional

from ..config import RenderParams
from ..core.world import BoundingBox, World


def render_world(
    world: World,
    column_sep: str = "|",
    row_sep: str = "\n",
    populated_char: str = "X",
    not_populated_char: str = " ",
    box: Optional[BoundingBox] = None,
) -> str:
    """
    Render a World as text.

    Args:
        world: World to render
        column_sep: Separator between cells of a row
        row_sep: Separator between rows
        populated_char: Character for populated cells
        not_populated_char: Character for empty cells
        box: Window to render (default: the World's bounding box)

    Returns:
        One line per non-zero y, one character per non-zero x

    Raises:
        EmptyWorldError: If no box is given and the World is empty
    """
    grid = world.to_array(box)
    return row_sep.join(
        column_sep.join(populated_char if populated else not_populated_char for populated in row)
        for row in grid
    )


def render_with(world: World, params: RenderParams, box: Optional[BoundingBox] = None) -> str:
    """Render using configured characters."""
    return render_world(
        world,
        column_sep=params.column_sep,
        row_sep=params.row_sep,
        populated_char=params.populated_char,
        not_populated_char=params.not_populated_char,
        box=box,
    )

"""
Transition rule for Conway's Game of Life (B3/S23).

    populated,     < 2 neighbours  → dies (underpopulation)
    populated,   2-3 neighbours    → survives
    populated,     > 3 neighbours  → dies (overcrowding)
    not populated, 3 neighbours    → born
    not populated, otherwise       → stays empty
"""

from __future__ import annotations
from typing import Iterable

from .cells import CellLike
from .neighbourhood import neighbours
from .world import CellState, World


def next_state(is_populated: bool, populated_neighbours: int) -> CellState:
    """
    State of a cell in the next generation.

    Args:
        is_populated: Whether the cell is populated now
        populated_neighbours: Number of populated neighbours (0-8)
    """
    if is_populated:
        if populated_neighbours < 2:
            return CellState.NOT_POPULATED
        if populated_neighbours <= 3:
            return CellState.POPULATED
        return CellState.NOT_POPULATED
    if populated_neighbours == 3:
        return CellState.POPULATED
    return CellState.NOT_POPULATED


def count_populated(world: World, cells: Iterable[CellLike]) -> int:
    """Number of populated cells among `cells`."""
    return sum(1 for cell in cells if world.is_populated(cell))


def compute_cell_next_state(world: World, cell: CellLike) -> CellState:
    """Next-generation state of a single cell of `world`."""
    return next_state(world.is_populated(cell), count_populated(world, neighbours(cell)))

"""
Core module for the sparse Game of Life.

Contains:
- Cell: zero-less grid coordinates and cell ids
- World: sparse generation state (CellState per tracked cell)
- neighbours: fixed-order eight-cell neighbourhood
- next_state: B3/S23 transition rule
- next_generation / EvolutionEngine: frontier-driven generation engine
"""

from .cells import (
    Cell, InvalidCellError,
    step_up, step_down, axis_values, cell_id, parse_cell_id,
)
from .world import (
    CellState, World, AxisRange, BoundingBox,
    EmptyWorldError, FrozenWorldError, bounding_box,
)
from .neighbourhood import neighbours, NEIGHBOUR_ORDER
from .rules import next_state, count_populated, compute_cell_next_state
from .evolution import (
    next_generation, next_generation_recursive,
    EvolutionEngine, EvolutionResult, EvolutionStats, STRATEGIES,
)

__all__ = [
    # Cells
    "Cell",
    "InvalidCellError",
    "step_up",
    "step_down",
    "axis_values",
    "cell_id",
    "parse_cell_id",
    # World
    "CellState",
    "World",
    "AxisRange",
    "BoundingBox",
    "EmptyWorldError",
    "FrozenWorldError",
    "bounding_box",
    # Neighbourhood & rule
    "neighbours",
    "NEIGHBOUR_ORDER",
    "next_state",
    "count_populated",
    "compute_cell_next_state",
    # Evolution
    "next_generation",
    "next_generation_recursive",
    "EvolutionEngine",
    "EvolutionResult",
    "EvolutionStats",
    "STRATEGIES",
]

"""
Sparse Game of Life

Conway's Game of Life on an unbounded grid, stored sparsely: only tracked
cells are kept, and each generation is computed by walking outwards from
populated cells instead of scanning a bounded board.

Main components:
- core: Cells, World, neighbourhood, transition rule, generation engine
- visualization: Text rendering
- storage: Coordinate files
- config: Simulation configuration
"""

__version__ = "0.1.0"
__author__ = "Sparse Life Team"

from .core import (
    Cell,
    CellState,
    World,
    neighbours,
    next_state,
    next_generation,
    EvolutionEngine,
)
from .visualization import render_world
from .storage import load_world, save_world
from .config import LifeConfig

__all__ = [
    "Cell",
    "CellState",
    "World",
    "neighbours",
    "next_state",
    "next_generation",
    "EvolutionEngine",
    "render_world",
    "load_world",
    "save_world",
    "LifeConfig",
]

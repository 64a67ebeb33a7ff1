"""
Generation engine for the sparse Game of Life.

Computes W(t) → W(t+1) without scanning a bounded grid. Only cells whose
state can change are evaluated:
- every populated cell
- every cell with at least one populated neighbour

Traversal starts from the populated cells and walks outwards through
neighbours. An empty cell with no populated neighbour is stable, so the walk
stops there. A visited set (cell ids) guarantees each cell is evaluated once,
which bounds the work by 9 x population.

Two traversals give identical results:
- next_generation: explicit LIFO work list (no call-depth limit)
- next_generation_recursive: one function call per visited cell
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set, Tuple
import logging
import time

import numpy as np

from .cells import Cell, cell_id
from .neighbourhood import neighbours
from .rules import count_populated, next_state
from .world import CellState, World


logger = logging.getLogger(__name__)

STRATEGIES = ("stack", "recursive")


def _advance_with_stack(world: World) -> Tuple[World, int]:
    """One generation using a work list. Returns (next world, cells visited)."""
    next_world = World()
    visited: Set[str] = set()
    pending: List[Cell] = list(world.cells())

    while pending:
        cell = pending.pop()
        key = cell_id(cell)
        if key in visited:
            continue

        around = neighbours(cell)
        populated_neighbours = count_populated(world, around)
        is_populated = world.is_populated(cell)
        if not is_populated and populated_neighbours == 0:
            continue

        visited.add(key)
        if next_state(is_populated, populated_neighbours) is CellState.POPULATED:
            next_world.set(cell, CellState.POPULATED)
        pending.extend(around)

    return next_world.freeze(), len(visited)


def _visit(world: World, cell: Cell, next_world: World, visited: Set[str]) -> None:
    key = cell_id(cell)
    if key in visited:
        return

    around = neighbours(cell)
    populated_neighbours = count_populated(world, around)
    is_populated = world.is_populated(cell)
    if not is_populated and populated_neighbours == 0:
        return

    visited.add(key)
    if next_state(is_populated, populated_neighbours) is CellState.POPULATED:
        next_world.set(cell, CellState.POPULATED)
    for neighbour in around:
        _visit(world, neighbour, next_world, visited)


def _advance_recursively(world: World) -> Tuple[World, int]:
    """One generation using recursion. Returns (next world, cells visited)."""
    next_world = World()
    visited: Set[str] = set()
    try:
        for cell in world.cells():
            _visit(world, cell, next_world, visited)
    except RecursionError:
        raise ValueError(
            f"World too large for the recursive strategy "
            f"(population {world.population}); use the stack strategy"
        ) from None
    return next_world.freeze(), len(visited)


def next_generation(world: World) -> World:
    """
    Next generation of `world`.

    The input World is only read; a new frozen World is returned.
    """
    return _advance_with_stack(world)[0]


def next_generation_recursive(world: World) -> World:
    """
    Same as `next_generation`, traversing by recursion.

    Recursion depth grows with the size of connected populated regions, so
    large worlds may hit Python's recursion limit.

    Raises:
        ValueError: If the recursion limit is reached
    """
    return _advance_recursively(world)[0]


@dataclass
class EvolutionStats:
    """Statistics from an evolution run."""
    generations: int = 0
    cells_visited: int = 0

    # Timing
    start_time: float = 0.0
    end_time: float = 0.0

    @property
    def elapsed_time(self) -> float:
        return self.end_time - self.start_time

    @property
    def generations_per_second(self) -> float:
        if self.elapsed_time > 0:
            return self.generations / self.elapsed_time
        return 0.0


@dataclass
class EvolutionResult:
    """
    Result of an evolution run.

    history holds (generation, world) pairs, generation 0 included when
    history is stored.
    """
    final_world: World
    history: List[Tuple[int, World]] = field(default_factory=list)
    stats: EvolutionStats = field(default_factory=EvolutionStats)
    stop_reason: str = "max_generations"

    def get_world_at(self, generation: int) -> Optional[World]:
        """World at a given generation (if in history)."""
        for gen, world in self.history:
            if gen == generation:
                return world
        return None

    def population_series(self) -> np.ndarray:
        """Population of each stored generation."""
        return np.array([world.population for _, world in self.history], dtype=np.int64)


class EvolutionEngine:
    """
    Runs a World forward generation by generation.

    Example:
        engine = EvolutionEngine()
        result = engine.run(World.build(glider), max_generations=100)
        print(result.stop_reason, result.final_world.population)
    """

    def __init__(self, strategy: str = "stack"):
        """
        Args:
            strategy: "stack" (work list) or "recursive"
        """
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown traversal strategy: {strategy}")
        self.strategy = strategy
        self._advance = _advance_with_stack if strategy == "stack" else _advance_recursively

        self.generation = 0
        self.cells_visited = 0

        self._step_callbacks: List[Callable[[World, int], None]] = []

    def add_step_callback(self, callback: Callable[[World, int], None]) -> None:
        """Add callback called with (world, generation) after each step."""
        self._step_callbacks.append(callback)

    def reset(self) -> None:
        self.generation = 0
        self.cells_visited = 0

    def step(self, world: World) -> World:
        """Compute the next generation of `world`."""
        next_world, visited = self._advance(world)
        self.generation += 1
        self.cells_visited += visited

        logger.debug(
            f"Generation {self.generation}: population {next_world.population}, "
            f"visited {visited} cells"
        )

        for callback in self._step_callbacks:
            callback(next_world, self.generation)

        return next_world

    def run(
        self,
        world: World,
        max_generations: int = 100,
        store_history: bool = True,
        history_stride: int = 1,
        stop_when_extinct: bool = True,
    ) -> EvolutionResult:
        """
        Run evolution for several generations.

        Args:
            world: Generation zero
            max_generations: Maximum number of generations to compute
            store_history: Keep intermediate worlds
            history_stride: Store every N-th generation
            stop_when_extinct: Stop as soon as a generation is empty

        Returns:
            EvolutionResult with final world, history and statistics
        """
        if max_generations < 0:
            raise ValueError(f"max_generations must be non-negative, got {max_generations}")
        if history_stride < 1:
            raise ValueError(f"history_stride must be at least 1, got {history_stride}")

        self.reset()
        stats = EvolutionStats(start_time=time.time())
        history: List[Tuple[int, World]] = [(0, world)] if store_history else []
        stop_reason = "max_generations"

        current = world
        for generation in range(1, max_generations + 1):
            current = self.step(current)

            if store_history and generation % history_stride == 0:
                history.append((generation, current))

            if stop_when_extinct and current.population == 0:
                logger.info(f"World extinct at generation {generation}")
                stop_reason = "extinct"
                break

        stats.generations = self.generation
        stats.cells_visited = self.cells_visited
        stats.end_time = time.time()

        return EvolutionResult(
            final_world=current,
            history=history,
            stats=stats,
            stop_reason=stop_reason,
        )

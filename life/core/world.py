"""
Sparse world model.

A World is the state of the grid at one generation. Only tracked cells are
stored, keyed by cell id:

    {"{1,1}": POPULATED, "{2,1}": POPULATED, ...}

Any cell that is not stored is not populated, however far away it is, so the
grid has no edges. A World is built once (by `World.build`, `World.random`
or the generation engine), frozen, and only read afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional
import numpy as np

from .cells import Cell, CellLike, axis_values, cell_id, parse_cell_id


class CellState(Enum):
    """Populated / not populated flag of a cell."""
    POPULATED = True
    NOT_POPULATED = False

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def of(cls, flag: bool) -> "CellState":
        return cls.POPULATED if flag else cls.NOT_POPULATED


class EmptyWorldError(ValueError):
    """Raised when an operation needs at least one tracked cell."""


class FrozenWorldError(RuntimeError):
    """Raised when a published World is modified."""


@dataclass(frozen=True)
class AxisRange:
    """Inclusive coordinate range along one axis."""
    min: int
    max: int

    def values(self) -> List[int]:
        """Coordinates in the range, zero skipped."""
        return list(axis_values(self.min, self.max))

    def __len__(self) -> int:
        return len(self.values())


@dataclass(frozen=True)
class BoundingBox:
    """Smallest rectangle containing every tracked cell of a World."""
    x: AxisRange
    y: AxisRange

    @property
    def width(self) -> int:
        return len(self.x)

    @property
    def height(self) -> int:
        return len(self.y)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            "x": {"min": self.x.min, "max": self.x.max},
            "y": {"min": self.y.min, "max": self.y.max},
        }


class World:
    """
    Sparse mapping from cell to CellState.

    Example:
        world = World.build([(1, 1), (2, 1), (3, 1)])
        world.get(Cell(2, 1))        # CellState.POPULATED
        world.get(Cell(250, -70))    # CellState.NOT_POPULATED

        nxt = World()
        nxt.set(Cell(2, 2), CellState.POPULATED)
        nxt.freeze()
    """

    def __init__(self):
        self._cells: Dict[str, CellState] = {}
        self._frozen = False

    @classmethod
    def build(cls, populated_cells: Iterable[CellLike]) -> "World":
        """
        Create a World with the given populated cells.

        Repeated coordinates overwrite each other (last one wins).

        Args:
            populated_cells: Cells or (x, y) pairs

        Returns:
            Frozen World at generation zero

        Raises:
            InvalidCellError: If a coordinate is 0
        """
        world = cls()
        for cell in populated_cells:
            world.set(Cell.of(cell), CellState.POPULATED)
        return world.freeze()

    @classmethod
    def random(
        cls,
        grid_size: int,
        population: float,
        seed: Optional[int] = None,
    ) -> "World":
        """
        Randomly populate a grid_size x grid_size square in the positive quadrant.

        Cells are scanned column by column (x outer, y inner). Each one is
        populated when a uniform draw in [0, 100) is <= population, until the
        expected number of populated cells is reached.

        Args:
            grid_size: Number of cells on each side of the square
            population: Percentage of populated cells, in (0, 100]
            seed: Random seed (None = fresh entropy)
        """
        if grid_size < 1:
            raise ValueError(f"grid_size must be at least 1, got {grid_size}")
        if not 0 < population <= 100:
            raise ValueError(f"population must be in (0, 100], got {population}")

        rng = np.random.default_rng(seed)
        expected = int(np.floor(grid_size * grid_size * population / 100 + 0.5))

        world = cls()
        for x in range(1, grid_size + 1):
            for y in range(1, grid_size + 1):
                if len(world) >= expected:
                    return world.freeze()
                if rng.random() * 100 <= population:
                    world.set(Cell(x, y), CellState.POPULATED)
        return world.freeze()

    # ----- queries -----

    def get(self, cell: CellLike) -> CellState:
        """State of a cell; cells that are not tracked are not populated."""
        return self._cells.get(cell_id(cell), CellState.NOT_POPULATED)

    def is_populated(self, cell: CellLike) -> bool:
        return self.get(cell) is CellState.POPULATED

    def cells(self) -> Iterator[Cell]:
        """Tracked cells in insertion order."""
        for key in self._cells:
            yield parse_cell_id(key)

    def populated_cells(self) -> List[Cell]:
        return [parse_cell_id(k) for k, s in self._cells.items() if s is CellState.POPULATED]

    @property
    def population(self) -> int:
        """Number of populated cells."""
        return sum(1 for s in self._cells.values() if s is CellState.POPULATED)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def bounding_box(self) -> BoundingBox:
        return bounding_box(self)

    def to_array(self, box: Optional[BoundingBox] = None) -> np.ndarray:
        """
        Populated flags as a 2D bool array.

        Row 0 is the top row (y = box.y.max), column 0 the left column
        (x = box.x.min). Rows and columns for coordinate 0 are omitted.

        Raises:
            EmptyWorldError: If no box is given and the World is empty
        """
        if box is None:
            box = bounding_box(self)
        xs = box.x.values()
        ys = box.y.values()[::-1]
        grid = np.zeros((len(ys), len(xs)), dtype=bool)
        for row, y in enumerate(ys):
            for col, x in enumerate(xs):
                grid[row, col] = self.is_populated((x, y))
        return grid

    # ----- construction -----

    def set(self, cell: CellLike, state: CellState) -> "World":
        """Insert or overwrite a cell. Only allowed before `freeze`."""
        if self._frozen:
            raise FrozenWorldError("Cannot modify a published World")
        self._cells[cell_id(Cell.of(cell))] = CellState.of(bool(state))
        return self

    def freeze(self) -> "World":
        """Publish the World; it is read-only from now on."""
        self._frozen = True
        return self

    # ----- container protocol -----

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        try:
            return cell_id(cell) in self._cells
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Cell]:
        return self.cells()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return set(self.populated_cells()) == set(other.populated_cells())

    __hash__ = None

    def __repr__(self) -> str:
        return f"World(population={self.population}, tracked={len(self)})"


def bounding_box(world: World) -> BoundingBox:
    """
    Bounding box of all tracked cells.

    Raises:
        EmptyWorldError: If the World tracks no cells
    """
    if len(world) == 0:
        raise EmptyWorldError("Cannot compute the bounding box of an empty world")
    # Plain ints: coordinates may exceed int64
    cells = list(world.cells())
    xs = [cell.x for cell in cells]
    ys = [cell.y for cell in cells]
    return BoundingBox(
        x=AxisRange(min(xs), max(xs)),
        y=AxisRange(min(ys), max(ys)),
    )

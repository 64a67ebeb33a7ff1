"""
Coordinate file storage.

One populated cell per line, two integers separated by a delimiter:

    1,1
    2,1
    -3,12
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..core.cells import Cell, InvalidCellError
from ..core.world import World


logger = logging.getLogger(__name__)


class CoordinateFileError(ValueError):
    """Raised when a coordinate file line is not a valid cell."""

    def __init__(self, message: str, path: Optional[Path] = None, line_number: Optional[int] = None):
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f"{path}:{line_number}: " if line_number is not None else f"{path}: "
        super().__init__(f"{location}{message}")


def parse_coordinate_line(line: str, delimiter: str = ",") -> Cell:
    """
    Parse one "x<delimiter>y" line.

    Raises:
        CoordinateFileError: If the line is not two non-zero integers
    """
    fields = line.strip().split(delimiter)
    if len(fields) != 2:
        raise CoordinateFileError(f"Expected 2 fields separated by {delimiter!r}, got {line!r}")
    try:
        x, y = (int(f.strip()) for f in fields)
    except ValueError:
        raise CoordinateFileError(f"Coordinates must be integers, got {line!r}") from None
    try:
        return Cell(x, y)
    except InvalidCellError as e:
        raise CoordinateFileError(str(e)) from e


def load_cells(
    filepath: Union[str, Path],
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> List[Cell]:
    """
    Load cells from a coordinate file.

    Args:
        filepath: Path to coordinate file
        delimiter: Field delimiter
        encoding: Text encoding

    Returns:
        Cells in file order

    Raises:
        FileNotFoundError: If the file does not exist
        CoordinateFileError: On the first invalid line (empty lines included)
    """
    filepath = Path(filepath)
    with open(filepath, 'r', encoding=encoding) as f:
        lines = f.read().splitlines()

    cells = []
    for number, line in enumerate(lines, start=1):
        try:
            cells.append(parse_coordinate_line(line, delimiter))
        except CoordinateFileError as e:
            raise CoordinateFileError(str(e), path=filepath, line_number=number) from None

    logger.debug(f"Loaded {len(cells)} cells from {filepath}")
    return cells


def load_world(
    filepath: Union[str, Path],
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> World:
    """Load a generation-zero World from a coordinate file."""
    return World.build(load_cells(filepath, delimiter, encoding))


def save_world(
    world: World,
    filepath: Union[str, Path],
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> Path:
    """
    Save the populated cells of a World.

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w', encoding=encoding) as f:
        for cell in world.populated_cells():
            f.write(f"{cell.x}{delimiter}{cell.y}\n")

    logger.debug(f"Saved {world.population} cells to {filepath}")
    return filepath

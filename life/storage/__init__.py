"""
Storage module for the sparse Game of Life.

Provides persistence for generation-zero worlds as coordinate files.
"""

from .coordinates import (
    CoordinateFileError,
    parse_coordinate_line,
    load_cells,
    load_world,
    save_world,
)

__all__ = [
    "CoordinateFileError",
    "parse_coordinate_line",
    "load_cells",
    "load_world",
    "save_world",
]

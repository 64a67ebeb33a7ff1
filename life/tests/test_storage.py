"""
Tests for coordinate file storage.
"""

import pytest
from life.core import Cell, World
from life.storage import (
    CoordinateFileError, parse_coordinate_line, load_cells, load_world, save_world,
)


class TestParseCoordinateLine:
    """Tests for parse_coordinate_line."""

    def test_parse(self):
        assert parse_coordinate_line("1,2") == Cell(1, 2)
        assert parse_coordinate_line(" 3 , -4 ") == Cell(3, -4)

    def test_custom_delimiter(self):
        assert parse_coordinate_line("5;-6", delimiter=";") == Cell(5, -6)
        with pytest.raises(CoordinateFileError):
            parse_coordinate_line("5;-6")

    @pytest.mark.parametrize("line", ["", "1", "1,2,3", "a,b", "1.5,2", "0,1", "1,0"])
    def test_invalid(self, line):
        with pytest.raises(CoordinateFileError):
            parse_coordinate_line(line)


class TestCoordinateFiles:
    """Tests for loading and saving coordinate files."""

    def test_load(self, tmp_path):
        path = tmp_path / "glider.txt"
        path.write_text("1,1\n2,1\n2,3\n3,1\n3,2\n", encoding="utf-8")

        cells = load_cells(path)
        assert cells == [Cell(1, 1), Cell(2, 1), Cell(2, 3), Cell(3, 1), Cell(3, 2)]

        world = load_world(path)
        assert world.population == 5
        assert world.is_populated((2, 3))

    def test_empty_line_is_error(self, tmp_path):
        path = tmp_path / "gap.txt"
        path.write_text("1,1\n\n2,2\n", encoding="utf-8")

        with pytest.raises(CoordinateFileError) as excinfo:
            load_cells(path)
        assert excinfo.value.line_number == 2
        assert "gap.txt:2" in str(excinfo.value)

    def test_trailing_blank_line_is_error(self, tmp_path):
        path = tmp_path / "trailing.txt"
        path.write_text("1,1\n\n", encoding="utf-8")

        with pytest.raises(CoordinateFileError):
            load_cells(path)

    def test_zero_coordinate_is_error(self, tmp_path):
        path = tmp_path / "zero.txt"
        path.write_text("1,1\n0,4\n", encoding="utf-8")

        with pytest.raises(CoordinateFileError) as excinfo:
            load_world(path)
        assert excinfo.value.line_number == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_cells(tmp_path / "missing.txt")

    def test_save_and_load(self, tmp_path):
        world = World.build([(-2, 5), (1, 1), (3, -1)])
        path = save_world(world, tmp_path / "nested" / "world.txt")

        assert path.read_text(encoding="utf-8") == "-2,5\n1,1\n3,-1\n"
        assert load_world(path) == world

    def test_save_custom_delimiter(self, tmp_path):
        world = World.build([(1, 2)])
        path = save_world(world, tmp_path / "world.txt", delimiter=" ")

        assert path.read_text(encoding="utf-8") == "1 2\n"
        assert load_world(path, delimiter=" ") == world

    def test_save_skips_not_populated(self, tmp_path):
        world = World()
        world.set((1, 1), True)
        world.set((2, 2), False)
        path = save_world(world.freeze(), tmp_path / "world.txt")

        assert path.read_text(encoding="utf-8") == "1,1\n"

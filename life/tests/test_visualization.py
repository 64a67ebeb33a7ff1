"""
Tests for text rendering.
"""

import pytest
from life.config import RenderParams
from life.core import World, AxisRange, BoundingBox, EmptyWorldError, next_generation
from life.visualization import render_world, render_with


@pytest.fixture
def glider():
    return World.build([(1, 1), (2, 1), (2, 3), (3, 1), (3, 2)])


class TestRenderWorld:
    """Tests for render_world."""

    def test_generations(self, glider):
        """Generation zero, one and two of the glider."""
        assert render_world(glider) == ' |X| \n | |X\nX|X|X'

        first = next_generation(glider)
        assert render_world(first) == 'X| |X\n |X|X\n |X| '

        second = next_generation(first)
        assert render_world(second) == ' | |X\nX| |X\n |X|X'

    def test_custom_characters(self, glider):
        text = render_world(
            glider,
            column_sep="",
            row_sep="/",
            populated_char="#",
            not_populated_char=".",
        )
        assert text == ".#./..#/###"

    def test_skips_zero(self):
        """No row or column for coordinate 0."""
        world = World.build([(-1, -1), (1, 1)])
        assert render_world(world) == ' |X\nX| '

    def test_dimensions(self):
        world = World.build([(-3, 2), (4, -2)])
        lines = render_world(world, column_sep="").split("\n")
        # y: 2, 1, -1, -2 / x: -3..-1, 1..4
        assert len(lines) == 4
        assert all(len(line) == 7 for line in lines)

    def test_single_cell(self):
        assert render_world(World.build([(7, -7)])) == "X"

    def test_explicit_box(self, glider):
        box = BoundingBox(x=AxisRange(1, 2), y=AxisRange(1, 1))
        assert render_world(glider, box=box) == "X|X"

    def test_empty_world(self):
        with pytest.raises(EmptyWorldError):
            render_world(World.build([]))

    def test_render_with(self, glider):
        params = RenderParams(column_sep=" ", populated_char="O", not_populated_char="-")
        assert render_with(glider, params) == "- O -\n- - O\nO O O"

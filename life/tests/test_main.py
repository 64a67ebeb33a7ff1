"""
Tests for the command line interface.
"""

import pytest
from life.core import World
from life.storage import load_world
from life.main import (
    main, ask_grid_size, ask_population, confirm, EMPTY_WORLD_NOTICE,
)


GEN_0 = ' |X| \n | |X\nX|X|X'
GEN_1 = 'X| |X\n |X|X\n |X| '
GEN_2 = ' | |X\nX| |X\n |X|X'


def scripted(*answers):
    """Prompt function replaying answers, then end of input."""
    remaining = iter(answers)

    def ask(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return ask


@pytest.fixture
def glider_file(tmp_path):
    path = tmp_path / "glider.txt"
    path.write_text("1,1\n2,1\n2,3\n3,1\n3,2\n", encoding="utf-8")
    return path


class TestPrompts:
    """Tests for interactive prompts."""

    def test_grid_size_menu(self):
        assert ask_grid_size(scripted("2")) == 10
        assert ask_grid_size(scripted("")) == 5
        assert ask_grid_size(scripted("Large (25x25)")) == 25

    def test_grid_size_custom(self):
        assert ask_grid_size(scripted("9", "abc", "5", "0", "-3", "7")) == 7

    def test_population(self):
        assert ask_population(scripted("")) == 25.0
        assert ask_population(scripted("150", "x", "0", "12.5")) == 12.5

    def test_confirm(self):
        assert confirm("Continue?", scripted("")) is True
        assert confirm("Continue?", scripted("maybe", "N")) is False
        assert confirm("Continue?", scripted("yes")) is True
        assert confirm("Continue?", scripted()) is False


class TestBatchMode:
    """Tests for --generations runs."""

    def test_glider(self, glider_file, capsys):
        status = main(["--load", str(glider_file), "--generations", "2"])
        out = capsys.readouterr().out

        assert status == 0
        assert f"Generation 0:\n{GEN_0}\n" in out
        assert f"Generation 1:\n{GEN_1}\n" in out
        assert f"Generation 2:\n{GEN_2}\n" in out
        assert "Generation 3:" not in out

    def test_recursive_strategy(self, glider_file, capsys):
        status = main(["--load", str(glider_file), "--generations", "2", "--strategy", "recursive"])
        out = capsys.readouterr().out

        assert status == 0
        assert f"Generation 2:\n{GEN_2}\n" in out

    def test_save(self, glider_file, tmp_path, capsys):
        target = tmp_path / "out" / "final.txt"
        status = main(["--load", str(glider_file), "--generations", "2", "--save", str(target)])

        assert status == 0
        final = load_world(target)
        assert final.population == 5
        assert final == World.build([(1, 1), (2, -1), (3, -1), (3, 1), (3, 2)])

    def test_random_world(self, capsys):
        status = main(["--size", "5", "--population", "100", "--generations", "1"])
        out = capsys.readouterr().out

        assert status == 0
        assert "Generated random 5x5 world with 100% of populated cells!" in out
        assert "X|X|X|X|X" in out

    def test_extinct(self, tmp_path, capsys):
        path = tmp_path / "lonely.txt"
        path.write_text("1,1\n", encoding="utf-8")

        status = main(["--load", str(path), "--generations", "5"])
        out = capsys.readouterr().out

        assert status == 0
        assert f"Generation 1:\n{EMPTY_WORLD_NOTICE}\n" in out
        assert "Generation 2:" not in out

    def test_config_file(self, glider_file, tmp_path, capsys):
        config_path = tmp_path / "life.json"
        config_path.write_text(
            '{"render": {"populated_char": "#", "not_populated_char": ".", "column_sep": ""}}',
            encoding="utf-8",
        )

        status = main(["--config", str(config_path), "--load", str(glider_file), "--generations", "0"])
        out = capsys.readouterr().out

        assert status == 0
        assert ".#.\n..#\n###" in out

    def test_recursive_strategy_large_world(self, capsys):
        """Too large for recursion: logged error and status 1."""
        status = main(["--size", "50", "--population", "100", "--generations", "1",
                       "--strategy", "recursive"])
        assert status == 1

    def test_config_unknown_key(self, tmp_path, capsys):
        config_path = tmp_path / "life.json"
        config_path.write_text('{"setup": {"bogus": 1}}', encoding="utf-8")

        assert main(["--config", str(config_path), "--size", "5", "--population", "25",
                     "--generations", "1"]) == 1

    def test_invalid_config(self, capsys):
        assert main(["--size", "5", "--population", "150", "--generations", "1"]) == 1

    def test_bad_coordinate_file(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("1,1\nnot a cell\n", encoding="utf-8")

        assert main(["--load", str(path), "--generations", "1"]) == 1

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--load", str(tmp_path / "missing.txt"), "--generations", "1"]) == 1


class TestInteractiveMode:
    """Tests for interactive runs."""

    def test_setup_and_run(self, capsys):
        status = main(["--seed", "1"], ask=scripted("1", "100", "y", "n"))
        out = capsys.readouterr().out

        assert status == 0
        assert "Generated random 5x5 world with 100% of populated cells!" in out
        assert "X|X|X|X|X" in out
        assert out.rstrip().endswith("Goodbye!")

    def test_loaded_world(self, glider_file, capsys):
        status = main(["--load", str(glider_file)], ask=scripted("y", "", "n"))
        out = capsys.readouterr().out

        assert status == 0
        assert f"{GEN_0}\n{GEN_1}\n{GEN_2}\n" in out

    def test_end_of_input_stops(self, glider_file, capsys):
        status = main(["--load", str(glider_file)], ask=scripted())
        out = capsys.readouterr().out

        assert status == 0
        assert GEN_0 in out
        assert GEN_1 not in out

    def test_no_input_at_size_prompt(self, capsys):
        """End of input during setup ends the run with status 1."""
        assert main([], ask=scripted()) == 1
        assert "Goodbye!" not in capsys.readouterr().out

    def test_no_input_at_population_prompt(self, capsys):
        assert main([], ask=scripted("1")) == 1

    def test_size_given_skips_size_prompt(self, capsys):
        status = main(["--size", "10", "--seed", "1"], ask=scripted("100", "n"))
        out = capsys.readouterr().out

        assert status == 0
        assert "Choose the initial size of the world" not in out
        assert "Generated random 10x10 world with 100% of populated cells!" in out

    def test_population_given_skips_population_prompt(self, capsys):
        status = main(["--population", "100", "--seed", "1"], ask=scripted("2", "n"))
        out = capsys.readouterr().out

        assert status == 0
        assert "Generated random 10x10 world with 100% of populated cells!" in out

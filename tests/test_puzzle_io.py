import io

import click

from superdo.puzzle_io import read_puzzles, render_block, render_grid
from tests.puzzles import PUZZLE_1, PUZZLE_2, SOLUTION_1, as_string


def test_read_puzzles_across_lines():
    text = as_string(PUZZLE_1)
    stream = io.StringIO("\n".join(" ".join(text[i : i + 9]) for i in range(0, 81, 9)))

    assert list(read_puzzles(stream)) == [PUZZLE_1]


def test_read_puzzles_groups_of_81():
    text = as_string(PUZZLE_1) + as_string(PUZZLE_2)
    stream = io.StringIO("puzzle: " + text[:50] + "\n" + text[50:140] + "\n" + text[140:] + "12\n")

    assert list(read_puzzles(stream)) == [PUZZLE_1, PUZZLE_2]


def test_read_puzzles_drops_partial():
    assert list(read_puzzles(io.StringIO("123 456\n"))) == []


def test_render_grid():
    assert render_grid(SOLUTION_1).split("\n") == [
        "".join(map(str, row)) for row in SOLUTION_1
    ]


def test_render_block():
    block = render_block(SOLUTION_1, "~~~")
    assert block.split("\n")[0] == "~~~"
    assert block.split("\n")[1] == "748613925"


def test_render_grid_color():
    colored = render_grid(SOLUTION_1, givens=PUZZLE_1, color=True)

    assert colored != render_grid(SOLUTION_1)
    assert click.unstyle(colored) == render_grid(SOLUTION_1)

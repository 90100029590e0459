import copy

from click.testing import CliRunner

from superdo.cli import DEFAULT_SEPARATOR, main
from tests.puzzles import (
    PUZZLE_1,
    PUZZLE_2,
    SOLUTION_1,
    TWO_WAY,
    TWO_WAY_OTHER,
    as_string,
)


def block(grid, separator=DEFAULT_SEPARATOR):
    return separator + "\n" + "\n".join("".join(map(str, row)) for row in grid) + "\n"


def test_board_argument():
    result = CliRunner().invoke(main, [as_string(PUZZLE_1)])

    assert result.exit_code == 0, result.output
    assert result.output == block(SOLUTION_1) + "\n"


def test_reads_stdin():
    text = as_string(PUZZLE_1) + "\n" + " ".join(as_string(PUZZLE_2))
    result = CliRunner().invoke(main, ["-j", "2"], input=text)

    assert result.exit_code == 0, result.output
    assert result.output.startswith(block(SOLUTION_1) + "\n")
    assert result.output.count(DEFAULT_SEPARATOR) == 2
    assert result.output.endswith("\n\n")


def test_all_solutions():
    result = CliRunner().invoke(main, ["--all", "-s", "==", as_string(TWO_WAY)])

    assert result.exit_code == 0, result.output
    assert result.output.count("==\n") == 2
    assert block(SOLUTION_1, "==") in result.output
    assert block(TWO_WAY_OTHER, "==") in result.output


def test_first_solution_only():
    result = CliRunner().invoke(main, [as_string(TWO_WAY)])

    assert result.exit_code == 0, result.output
    assert result.output.count(DEFAULT_SEPARATOR) == 1


def test_brute_force_strategy():
    result = CliRunner().invoke(
        main, ["--strategy", "brute-force", "-a", as_string(TWO_WAY)]
    )

    assert result.exit_code == 0, result.output
    assert result.output == block(SOLUTION_1) + block(TWO_WAY_OTHER) + "\n"


def test_separator_from_environment():
    result = CliRunner().invoke(
        main, [as_string(PUZZLE_1)], env={"SUPERDO_SEPARATOR": "#####"}
    )

    assert result.exit_code == 0, result.output
    assert result.output == block(SOLUTION_1, "#####") + "\n"


def test_conflicting_puzzle_is_skipped():
    puzzle = copy.deepcopy(PUZZLE_1)
    puzzle[0][0] = 4
    result = CliRunner().invoke(main, [as_string(puzzle), as_string(PUZZLE_1)])

    assert result.exit_code == 0, result.output
    assert "skipping puzzle" in result.output
    assert result.output.count(DEFAULT_SEPARATOR) == 1


def test_incomplete_input_prints_nothing():
    result = CliRunner().invoke(main, [], input="1 2 3\n")

    assert result.exit_code == 0, result.output
    assert DEFAULT_SEPARATOR not in result.output


def test_short_board_argument():
    result = CliRunner().invoke(main, ["12345"])

    assert result.exit_code == 2


def test_long_board_argument():
    result = CliRunner().invoke(main, [as_string(PUZZLE_1) + "0"])

    assert result.exit_code == 2


def test_rejects_zero_threads():
    result = CliRunner().invoke(main, ["-j", "0", as_string(PUZZLE_1)])

    assert result.exit_code == 2

import os
import sys
import typing as t
from concurrent.futures import ThreadPoolExecutor

import click
from loguru import logger

from .board import Grid, InvalidPuzzle, load_board
from .puzzle_io import read_puzzles, render_block
from .solvers import STRATEGIES, PropagationSolver, Solver, get_solver

DEFAULT_SEPARATOR = "-----------------"
LOG_LEVELS = ("WARNING", "DEBUG", "TRACE")

PROMPT = (
    "Input sudoku boards digit by digit (left to right, top to bottom, "
    "0 for unknown digits, spaces and newlines are ignored)"
)


def setup_logging(debug: int) -> None:
    logger.remove()
    logger.add(sys.stderr, level=LOG_LEVELS[min(debug, len(LOG_LEVELS) - 1)])


def parse_boards(
    ctx: click.Context, param: click.Parameter, value: t.Tuple[str, ...]
) -> t.List[Grid]:
    try:
        return [load_board(s) for s in value]
    except InvalidPuzzle as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def solve_one(
    solver: Solver,
    puzzle: Grid,
    find_all: bool,
    separator: str,
    color: bool,
) -> int:
    found = 0
    try:
        for grid in solver.solutions(puzzle, find_all):
            click.echo(render_block(grid, separator, puzzle, color), color=color)
            found += 1
    except InvalidPuzzle as e:
        logger.warning("skipping puzzle: {}", e)
    click.echo()
    return found


@click.command(context_settings={"auto_envvar_prefix": "SUPERDO"})
@click.argument("boards", nargs=-1, callback=parse_boards)
@click.option(
    "-i",
    "--input",
    "source",
    type=click.File("r"),
    default="-",
    help="Read puzzles from this file when no BOARDS are given.",
)
@click.option("-d", "--debug", count=True, help="Log more; repeat for traces.")
@click.option("-a", "--all", "find_all", is_flag=True, help="Print every solution.")
@click.option(
    "-s",
    "--separator",
    default=DEFAULT_SEPARATOR,
    show_default=True,
    help="Line printed before each solution.",
)
@click.option(
    "-j",
    "--threads",
    type=click.IntRange(min=1),
    default=lambda: os.cpu_count() or 1,
    help="Worker threads for the search.  [default: CPU count]",
)
@click.option(
    "--strategy",
    type=click.Choice(sorted(STRATEGIES)),
    default=PropagationSolver.name,
    show_default=True,
)
@click.option("--color/--no-color", default=False, help="Highlight filled-in cells.")
def main(
    boards: t.List[Grid],
    source: t.TextIO,
    debug: int,
    find_all: bool,
    separator: str,
    threads: int,
    strategy: str,
    color: bool,
) -> None:
    """Solve 81-digit sudoku BOARDS, or every puzzle read from the input."""
    setup_logging(debug)

    try:
        executor = ThreadPoolExecutor(max_workers=threads, thread_name_prefix="superdo")
    except (ValueError, RuntimeError) as e:
        raise click.ClickException(f"cannot start {threads} worker thread(s): {e}")

    with executor:
        solver = get_solver(strategy, executor)

        if boards:
            puzzles: t.Iterable[Grid] = boards
        else:
            if source.isatty():
                click.echo(PROMPT, err=True)
            puzzles = read_puzzles(source)

        for index, puzzle in enumerate(puzzles, start=1):
            found = solve_one(solver, puzzle, find_all, separator, color)
            logger.debug("puzzle #{}: {} solution(s)", index, found)


if __name__ == "__main__":
    main()

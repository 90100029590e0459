import typing as t

import click
from loguru import logger

from .board import SIDE, Grid

CELLS = SIDE * SIDE

PALETTE = (
    "bright_black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_red",
    "bright_green",
)


def read_puzzles(stream: t.Iterable[str]) -> t.Iterator[Grid]:
    """Yield a grid for every 81 digits found across the lines of `stream`."""
    digits: t.List[int] = []

    for line in stream:
        for ch in line:
            if "0" <= ch <= "9":
                digits.append(ord(ch) - ord("0"))
                if len(digits) == CELLS:
                    yield [digits[i : i + SIDE] for i in range(0, CELLS, SIDE)]
                    digits = []

    if digits:
        logger.warning("ignoring {} trailing digit(s) of an incomplete puzzle", len(digits))


def render_grid(grid: Grid, givens: t.Optional[Grid] = None, color: bool = False) -> str:
    lines = []
    for row in range(SIDE):
        line = ""
        for col in range(SIDE):
            num = grid[row][col]
            square = str(num)
            if color:
                filled = givens is not None and givens[row][col] == 0
                square = click.style(
                    square, fg=PALETTE[num], bold=filled, underline=filled
                )
            line += square
        lines.append(line)
    # text streams turn "\n" into the platform line terminator
    return "\n".join(lines)


def render_block(
    grid: Grid,
    separator: str,
    givens: t.Optional[Grid] = None,
    color: bool = False,
) -> str:
    return separator + "\n" + render_grid(grid, givens, color)

import typing as t

from .board import SIDE, Grid, Point, box_pos

Mask = t.List[t.List[bool]]


def blank_mask(grid: Grid) -> Mask:
    return [[value == 0 for value in row] for row in grid]


def next_digit(grid: Grid, row: int, col: int) -> t.Optional[int]:
    """Smallest digit above the cell's current value that fits there."""
    taken = set(grid[row])
    taken.update(grid[r][col] for r in range(SIDE))
    taken.update(grid[r][c] for r, c in box_pos(row, col))

    for num in range(grid[row][col] + 1, SIDE + 1):
        if num not in taken:
            return num
    return None


def brute_force(grid: Grid, blank: Mask, stack: t.List[Point]) -> bool:
    """Advance `grid` in place to the next solution in enumeration order.

    `stack` holds the cells currently carrying a tentative digit, most recent
    last; start the first call with ``[(0, 0)]``. On success the stack is left
    so that calling again resumes after the solution just found. Returns False
    once every possibility has been tried.
    """
    if not stack:
        return False

    row, col = stack.pop()
    pos = row * SIDE + col

    while True:
        row, col = divmod(pos, SIDE)

        if blank[row][col]:
            num = next_digit(grid, row, col)
            if num is None:
                grid[row][col] = 0
                if not stack:
                    return False
                row, col = stack.pop()
                pos = row * SIDE + col
                continue

            grid[row][col] = num
            stack.append((row, col))

        if pos == SIDE * SIDE - 1:
            return True
        pos += 1

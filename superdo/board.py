import typing as t
from dataclasses import dataclass, field

from loguru import logger


SIDE = 9
BOX = 3

ALL_NUMBERS = frozenset(range(1, SIDE + 1))

Grid = t.List[t.List[int]]
Point = t.Tuple[int, int]


class Guess(t.NamedTuple):
    row: int
    col: int
    digit: int


class InvalidPuzzle(ValueError):
    pass


def box_pos(row: int, col: int) -> t.Iterator[Point]:
    sr, sc = row // BOX * BOX, col // BOX * BOX
    for i in range(BOX):
        for j in range(BOX):
            yield (sr + i, sc + j)


def houses() -> t.Iterator[t.Sequence[Point]]:
    for br in range(0, SIDE, BOX):
        for bc in range(0, SIDE, BOX):
            yield list(box_pos(br, bc))

    for row in range(SIDE):
        yield [(row, col) for col in range(SIDE)]

    for col in range(SIDE):
        yield [(row, col) for row in range(SIDE)]


def peers(row: int, col: int) -> t.FrozenSet[Point]:
    """Every other cell sharing a row, column or box with (row, col)."""
    points = {(row, c) for c in range(SIDE)}
    points.update((r, col) for r in range(SIDE))
    points.update(box_pos(row, col))
    points.discard((row, col))
    return frozenset(points)


# flat indices, row-major
PEERS = [
    tuple(r * SIDE + c for r, c in sorted(peers(i // SIDE, i % SIDE)))
    for i in range(SIDE * SIDE)
]
ROW_OTHERS = [
    tuple(i // SIDE * SIDE + c for c in range(SIDE) if c != i % SIDE)
    for i in range(SIDE * SIDE)
]
COL_OTHERS = [
    tuple(r * SIDE + i % SIDE for r in range(SIDE) if r != i // SIDE)
    for i in range(SIDE * SIDE)
]
BOX_OTHERS = [
    tuple(
        r * SIDE + c
        for r, c in box_pos(i // SIDE, i % SIDE)
        if r * SIDE + c != i
    )
    for i in range(SIDE * SIDE)
]


def load_board(s: str) -> Grid:
    digits = [int(ch) for ch in s if "0" <= ch <= "9"]
    if len(digits) != SIDE * SIDE:
        raise InvalidPuzzle(f"expected {SIDE * SIDE} digits, got {len(digits)}")
    return [digits[row * SIDE : (row + 1) * SIDE] for row in range(SIDE)]


def check_shape(grid: Grid) -> None:
    if len(grid) != SIDE or any(len(row) != SIDE for row in grid):
        raise InvalidPuzzle(f"grid must be {SIDE}x{SIDE}")
    for row in grid:
        for value in row:
            if not 0 <= value <= SIDE:
                raise InvalidPuzzle(f"digit out of range: {value!r}")


def check_givens(grid: Grid) -> None:
    check_shape(grid)
    if has_conflict(grid):
        raise InvalidPuzzle("givens repeat a digit in a row, column or box")


def has_conflict(grid: Grid) -> bool:
    for house in houses():
        encountered = set()

        for row, col in house:
            square = grid[row][col]
            if square == 0:
                continue
            if square in encountered:
                return True
            encountered.add(square)
    return False


def is_solution(grid: Grid) -> bool:
    return all(0 not in row for row in grid) and not has_conflict(grid)


def matches_givens(puzzle: Grid, grid: Grid) -> bool:
    return all(
        puzzle[row][col] in (0, grid[row][col])
        for row in range(SIDE)
        for col in range(SIDE)
    )


@dataclass
class Cell:
    value: int = 0
    candidates: t.Set[int] = field(default_factory=set)

    @classmethod
    def from_value(cls, value: int) -> "Cell":
        if value == 0:
            return cls(0, set(ALL_NUMBERS))
        return cls(value, set())

    @property
    def assigned(self) -> bool:
        return self.value != 0


class Board:
    __slots__ = ("cells",)

    def __init__(self, cells: t.List[Cell]) -> None:
        self.cells = cells

    @classmethod
    def empty(cls) -> "Board":
        return cls([Cell.from_value(0) for _ in range(SIDE * SIDE)])

    @classmethod
    def from_grid(cls, grid: Grid) -> "Board":
        check_givens(grid)

        board = cls.empty()
        for row in range(SIDE):
            for col in range(SIDE):
                if grid[row][col]:
                    board.assign(grid[row][col], row, col)
        return board

    def clone(self) -> "Board":
        return Board([Cell(c.value, set(c.candidates)) for c in self.cells])

    def get(self, row: int, col: int) -> Cell:
        return self.cells[row * SIDE + col]

    def value(self, row: int, col: int) -> int:
        return self.cells[row * SIDE + col].value

    def to_grid(self) -> Grid:
        return [
            [self.cells[row * SIDE + col].value for col in range(SIDE)]
            for row in range(SIDE)
        ]

    def assign(self, value: int, row: int, col: int) -> None:
        self._assign(row * SIDE + col, value)

    def _assign(self, index: int, value: int) -> None:
        cell = self.cells[index]
        cell.value = value
        cell.candidates.clear()
        for peer in PEERS[index]:
            self.cells[peer].candidates.discard(value)

    def is_exhausted(self) -> bool:
        return any(not c.assigned and not c.candidates for c in self.cells)

    def first_free(self, start: int = 0) -> t.Optional[Point]:
        for index in range(start, SIDE * SIDE):
            if not self.cells[index].assigned:
                return divmod(index, SIDE)
        return None

    def _hidden_single(self, index: int, others: t.Sequence[int]) -> int:
        counts = dict.fromkeys(self.cells[index].candidates, 1)
        for other in others:
            for num in self.cells[other].candidates:
                if num in counts:
                    counts[num] += 1
        for num in sorted(counts):
            if counts[num] == 1:
                return num
        return 0

    def solve(self) -> bool:
        """Fill in every value that follows from the current ones.

        Returns True once every cell is assigned. Returns False when a whole
        pass assigns nothing, or as soon as an unassigned cell has run out of
        candidates; `is_exhausted` tells the two apart.
        """
        cells = self.cells

        while True:
            has_empty = False
            progress = False

            for index, cell in enumerate(cells):
                if cell.assigned:
                    continue
                has_empty = True

                if not cell.candidates:
                    logger.trace("{} has no candidates left", divmod(index, SIDE))
                    return False

                if len(cell.candidates) == 1:
                    num = next(iter(cell.candidates))
                    logger.trace("{} naked single: {}", divmod(index, SIDE), num)
                    self._assign(index, num)
                    progress = True
                    continue

                for house, others in (
                    ("row", ROW_OTHERS),
                    ("column", COL_OTHERS),
                    ("box", BOX_OTHERS),
                ):
                    num = self._hidden_single(index, others[index])
                    if num:
                        logger.trace(
                            "{} hidden single in {}: {}", divmod(index, SIDE), house, num
                        )
                        self._assign(index, num)
                        progress = True
                        break

            if not has_empty:
                return True
            if not progress:
                return False

    def dump(self) -> str:
        lines = []
        for row in range(SIDE):
            squares = []
            for col in range(SIDE):
                cell = self.get(row, col)
                if cell.assigned:
                    squares.append(str(cell.value))
                else:
                    squares.append("0" + "".join(map(str, sorted(cell.candidates))))
            lines.append(" ".join(squares))
        return "\n".join(lines)

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(self.value(row, col)) for col in range(SIDE))
            for row in range(SIDE)
        )

    def __repr__(self) -> str:
        return f"Board({''.join(str(c.value) for c in self.cells)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Board):
            return self.cells == other.cells
        if isinstance(other, list):
            return self.to_grid() == other
        return NotImplemented

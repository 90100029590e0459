import abc
import typing as t
from concurrent.futures import Executor, ThreadPoolExecutor

from loguru import logger

from .board import Board, Grid, check_givens
from .brute import blank_mask, brute_force
from .search import SearchCoordinator, SearchState, SolutionCallback


class Solver(abc.ABC):
    name: t.ClassVar[str]

    @classmethod
    def from_executor(cls, executor: t.Optional[Executor] = None) -> "Solver":
        return cls()

    @abc.abstractmethod
    def solutions(self, grid: Grid, find_all: bool = False) -> t.Iterator[Grid]:
        """Yield completed grids for `grid`; only the first unless `find_all`."""


class PropagationSolver(Solver):
    """Constraint propagation, then a parallel search over the stuck cells."""

    name = "propagate"

    def __init__(
        self,
        executor: t.Optional[Executor] = None,
        max_workers: t.Optional[int] = None,
        on_solution: t.Optional[SolutionCallback] = None,
    ) -> None:
        self.executor = executor
        self.max_workers = max_workers
        self.on_solution = on_solution

    @classmethod
    def from_executor(cls, executor: t.Optional[Executor] = None) -> "Solver":
        return cls(executor=executor)

    def search(self, grid: Grid, find_all: bool = False) -> t.List[Board]:
        board = Board.from_grid(grid)
        state = SearchState(find_all=find_all)

        if self.executor is not None:
            return SearchCoordinator(self.executor, state, self.on_solution).run(board)

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="superdo"
        ) as executor:
            return SearchCoordinator(executor, state, self.on_solution).run(board)

    def solutions(self, grid: Grid, find_all: bool = False) -> t.Iterator[Grid]:
        for board in self.search(grid, find_all):
            yield board.to_grid()


class BruteForceSolver(Solver):
    """Plain backtracking over the blank cells, one solution per step."""

    name = "brute-force"

    def solutions(self, grid: Grid, find_all: bool = False) -> t.Iterator[Grid]:
        check_givens(grid)

        work = [list(row) for row in grid]
        blank = blank_mask(work)
        stack = [(0, 0)]
        found = 0

        while brute_force(work, blank, stack):
            found += 1
            logger.debug("brute force solution #{}", found)
            yield [list(row) for row in work]
            if not find_all:
                return

        logger.debug("brute force exhausted after {} solution(s)", found)


STRATEGIES: t.Dict[str, t.Type[Solver]] = {
    PropagationSolver.name: PropagationSolver,
    BruteForceSolver.name: BruteForceSolver,
}


def get_solver(name: str, executor: t.Optional[Executor] = None) -> Solver:
    try:
        cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"unknown strategy {name!r}") from None
    return cls.from_executor(executor)

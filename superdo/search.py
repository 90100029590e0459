import threading
import typing as t
from concurrent.futures import Executor
from dataclasses import dataclass, field

from loguru import logger

from .board import SIDE, Board, Guess

Path = t.Tuple[Guess, ...]
SolutionCallback = t.Callable[[Board, Path], None]


@dataclass
class SearchState:
    """State shared by every branch of one puzzle's search."""

    find_all: bool = False
    solutions: t.List[Board] = field(default_factory=list)
    _count: int = field(default=0, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @property
    def count(self) -> int:
        return self._count

    def should_stop(self) -> bool:
        return not self.find_all and self._count >= 1

    def record(self, board: Board) -> bool:
        with self._lock:
            if self.should_stop():
                return False
            self._count += 1
            self.solutions.append(board)
            return True


class SearchCoordinator:
    """Completes boards that propagation alone leaves stuck by guessing.

    A task follows one candidate of each guess itself; every other candidate
    becomes a new task on the executor that owns its own copy of the board and
    of the guess path. Tasks never wait on each other; `join` blocks
    until the last one for this puzzle has finished.
    """

    def __init__(
        self,
        executor: Executor,
        state: SearchState,
        on_solution: t.Optional[SolutionCallback] = None,
    ) -> None:
        self.executor = executor
        self.state = state
        self.on_solution = on_solution

        self._pending = 0
        self._idle = threading.Condition()
        self._errors: t.List[BaseException] = []

    def run(self, board: Board) -> t.List[Board]:
        self.submit(board, ())
        self.join()
        return self.state.solutions

    def submit(self, board: Board, path: Path) -> None:
        with self._idle:
            self._pending += 1
        try:
            self.executor.submit(self._task, board, path)
        except BaseException:
            self._done()
            raise

    def join(self) -> None:
        with self._idle:
            self._idle.wait_for(lambda: self._pending == 0)
        if self._errors:
            raise self._errors[0]

    def _done(self) -> None:
        with self._idle:
            self._pending -= 1
            if self._pending == 0:
                self._idle.notify_all()

    def _task(self, board: Board, path: Path) -> None:
        try:
            self.resolve(board, path)
        except Exception as e:
            logger.exception("search branch {} failed", path)
            with self._idle:
                self._errors.append(e)
        finally:
            self._done()

    def resolve(self, board: Board, path: Path) -> None:
        """Solve `board`, guessing where propagation gets stuck.

        The task keeps the smallest candidate of each guess for itself and
        hands the other candidates to new tasks, so each task runs down to a
        solution or a dead end instead of queueing whole levels of boards.
        """
        while not self.state.should_stop():
            if board.solve():
                if self.state.record(board):
                    logger.debug("solution #{} via {}", self.state.count, _fmt_path(path))
                    if self.on_solution is not None:
                        self.on_solution(board, path)
                return

            if board.is_exhausted():
                logger.debug("dead end after {}", _fmt_path(path))
                return

            start = path[-1].row * SIDE + path[-1].col if path else 0
            point = board.first_free(start)
            if point is None:
                return
            row, col = point

            first, *rest = sorted(board.get(row, col).candidates)
            for num in rest:
                if self.state.should_stop():
                    return
                branch = board.clone()
                branch.assign(num, row, col)
                self.submit(branch, path + (Guess(row, col, num),))

            board.assign(first, row, col)
            path = path + (Guess(row, col, first),)


def _fmt_path(path: Path) -> str:
    if not path:
        return "no guesses"
    return " ".join(f"r{g.row + 1}c{g.col + 1}={g.digit}" for g in path)

from .board import Board, Cell, Grid, Guess, InvalidPuzzle, load_board
from .brute import brute_force, next_digit
from .search import SearchCoordinator, SearchState
from .solvers import BruteForceSolver, PropagationSolver, Solver, get_solver

__all__ = [
    "Board",
    "BruteForceSolver",
    "Cell",
    "Grid",
    "Guess",
    "InvalidPuzzle",
    "PropagationSolver",
    "SearchCoordinator",
    "SearchState",
    "Solver",
    "brute_force",
    "get_solver",
    "load_board",
    "next_digit",
]

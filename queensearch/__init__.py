"""N-Queens search strategies: DFS, hill climbing and simulated annealing."""

from .backtracking import DFSResult, solve_dfs
from .exceptions import AllocationFailure, EmptyOrInvalid, QueenSearchError
from .hill_climbing import HillClimbResult, solve_hill_climb
from .simulated_annealing import AnnealingResult, solve_annealing
from .stack import SearchStack
from .utils import Coordinate, Deadline, SearchOutcome, count_threats, is_valid_solution

__all__ = [
    "solve_dfs",
    "solve_hill_climb",
    "solve_annealing",
    "DFSResult",
    "HillClimbResult",
    "AnnealingResult",
    "SearchStack",
    "Coordinate",
    "Deadline",
    "SearchOutcome",
    "count_threats",
    "is_valid_solution",
    "QueenSearchError",
    "AllocationFailure",
    "EmptyOrInvalid",
]

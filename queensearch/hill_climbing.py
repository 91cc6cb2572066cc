"""Steepest-descent hill climbing with random restarts for N-Queens.

The search state is one placement of N queens, one per row. Each round scans
the whole neighbourhood (every row moved to every other column), commits the
single best strictly-improving move, and restarts from a fresh random
placement when no neighbour improves on the current threat count.

Contract (public API)
---------------------
- Input: ``size >= 1``, ``max_time`` (seconds, ``>= 0``) and an integer
  ``seed``.
- Output: ``HillClimbResult(solution, restarts, moves, outcome, elapsed)``:
    - solution: full placement with 0 threats, or ``None`` on timeout.
    - restarts: random restarts performed; the first placement counts as
      restart 0.
    - moves: queens placed or moved (N per restart plus one per committed move).
    - outcome: ``FOUND`` or ``TIMEOUT``.
    - elapsed: wall time measured via ``perf_counter()``.

Determinism
-----------
Randomness comes from a ``random.Random(seed)`` owned by the call, so equal
``(size, seed)`` pairs replay the same sequence of restarts and moves. Ties in
the neighbourhood scan keep the first candidate found in row-major,
column-ascending order.

Termination
-----------
Hill climbing is incomplete: on boards where local optima are common it may
restart until the deadline. The time budget is the only guaranteed stop.
"""

from __future__ import annotations

import random
from typing import List, NamedTuple, Optional

from .utils import (
    Coordinate,
    Deadline,
    Placement,
    SearchOutcome,
    check_problem_size,
    count_threats,
    placement_from_columns,
)


class HillClimbResult(NamedTuple):
    solution: Optional[Placement]
    restarts: int
    moves: int
    outcome: SearchOutcome
    elapsed: float


def random_placement(size: int, rng: random.Random) -> Placement:
    """Place one queen per row at a uniformly random column."""
    return placement_from_columns(rng.randrange(size) for _ in range(size))


def solve_hill_climb(size: int, max_time: float, seed: int) -> HillClimbResult:
    """Run steepest-descent hill climbing with restarts until solved or out of time.

    Parameters
    ----------
    size : int
        Board dimension N.
    max_time : float
        Wall-clock budget in seconds.
    seed : int
        Seed of the generator used for every restart.

    Returns
    -------
    HillClimbResult
        Tuple (solution, restarts, moves, outcome, elapsed).

    Notes
    -----
    - Deadline polled after each restart's placement, before each
      neighbourhood scan and before every candidate evaluation in the scan.
    - Objective: ``count_threats`` over the full placement.
    """
    check_problem_size(size)
    deadline = Deadline(max_time)
    rng = random.Random(seed)
    restarts = -1
    moves = 0

    while True:
        restarts += 1
        board = random_placement(size, rng)
        moves += size

        if deadline.expired():
            return HillClimbResult(None, restarts, moves, SearchOutcome.TIMEOUT, deadline.elapsed())

        start_threats = count_threats(board)
        if start_threats == 0:
            return HillClimbResult(board, restarts, moves, SearchOutcome.FOUND, deadline.elapsed())

        while True:
            best = _best_neighbour(board, start_threats, deadline)
            if best is None:
                return HillClimbResult(None, restarts, moves, SearchOutcome.TIMEOUT, deadline.elapsed())

            best_threats, best_row, best_column = best
            if best_threats >= start_threats:
                # Local optimum: no neighbour improves, restart from scratch.
                break

            board[best_row] = Coordinate(best_row, best_column)
            moves += 1
            if best_threats == 0:
                return HillClimbResult(board, restarts, moves, SearchOutcome.FOUND, deadline.elapsed())
            start_threats = best_threats


def _best_neighbour(board: List[Coordinate], current_threats: int, deadline: Deadline):
    """Scan every single-queen move and return ``(threats, row, column)`` of the best.

    Only strictly lower counts replace the running best, so the first
    candidate wins ties. Returns ``None`` if the deadline expires mid-scan;
    ``board`` is left unchanged either way.
    """
    size = len(board)
    best_threats, best_row, best_column = current_threats, 0, 0

    for row in range(size):
        current_column = board[row].column
        for column in range(size):
            if deadline.expired():
                return None
            if column == current_column:
                continue

            board[row] = Coordinate(row, column)
            threats = count_threats(board)
            board[row] = Coordinate(row, current_column)
            if threats < best_threats:
                best_threats, best_row, best_column = threats, row, column

    return best_threats, best_row, best_column

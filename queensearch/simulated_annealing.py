"""Simulated Annealing solver for the N-Queens problem.

This module implements a fixed-acceptance simulated annealing search: the
configuration is a placement with one queen per row; at each step a random
row and a random column are drawn and the queen is tentatively moved there.
The move is kept if it does not increase the threat count, or with Metropolis
probability ``alpha * exp(old - new)`` otherwise. There are no restarts, so a
stuck state can only escape through that acceptance channel.

Contract (public API)
---------------------
- Input: problem size ``size >= 1``, time budget ``max_time`` (seconds),
  integer ``seed`` and the acceptance constant ``alpha`` (default 0.001).
- Output: ``AnnealingResult(solution, moves, outcome, elapsed)``:
    - solution: full placement with 0 threats, or ``None`` on timeout.
    - moves: queens placed or moved (N for the initial placement plus one per
      accepted move).
    - outcome: ``FOUND`` or ``TIMEOUT``.
    - elapsed: wall time measured via ``perf_counter()``.

Determinism
-----------
SA is stochastic but reproducible: every draw comes from a
``random.Random(seed)`` owned by the call.
"""

from __future__ import annotations

import math
import random
from typing import NamedTuple, Optional

from .hill_climbing import random_placement
from .utils import (
    Coordinate,
    Deadline,
    Placement,
    SearchOutcome,
    check_problem_size,
    count_threats,
)

DEFAULT_ALPHA = 0.001


class AnnealingResult(NamedTuple):
    solution: Optional[Placement]
    moves: int
    outcome: SearchOutcome
    elapsed: float


def acceptance_probability(old_threats: int, new_threats: int, alpha: float = DEFAULT_ALPHA) -> float:
    """Return ``alpha * exp(old - new)``; below ``alpha`` for worsening moves."""
    return alpha * math.exp(old_threats - new_threats)


def solve_annealing(
    size: int,
    max_time: float,
    seed: int,
    alpha: float = DEFAULT_ALPHA,
) -> AnnealingResult:
    """Run simulated annealing to remove every threat from an N-Queens board.

    Parameters
    ----------
    size : int
        Board dimension N.
    max_time : float
        Wall-clock budget in seconds.
    seed : int
        Seed of the generator used for placement, proposals and acceptance draws.
    alpha : float, default 0.001
        Scale of the acceptance probability for worsening moves.

    Returns
    -------
    AnnealingResult
        Tuple (solution, moves, outcome, elapsed).

    Notes
    -----
    - Proposal: a uniformly random row and column; the column may equal the
      current one (a no-op proposal, accepted as a non-worsening move).
    - Acceptance: ``new <= old`` always; otherwise iff ``r <= p`` with
      ``r = rng.random()`` and ``p = acceptance_probability(old, new, alpha)``.
    - Deadline polled after the initial placement and before every proposal.
    """
    check_problem_size(size)
    deadline = Deadline(max_time)
    rng = random.Random(seed)

    board = random_placement(size, rng)
    moves = size

    if deadline.expired():
        return AnnealingResult(None, moves, SearchOutcome.TIMEOUT, deadline.elapsed())

    current_threats = count_threats(board)
    if current_threats == 0:
        return AnnealingResult(board, moves, SearchOutcome.FOUND, deadline.elapsed())

    while True:
        if deadline.expired():
            return AnnealingResult(None, moves, SearchOutcome.TIMEOUT, deadline.elapsed())

        # Propose moving a random queen to a random column
        row = rng.randrange(size)
        column = rng.randrange(size)
        previous = board[row]
        board[row] = Coordinate(row, column)

        candidate_threats = count_threats(board)
        if candidate_threats == 0:
            return AnnealingResult(board, moves, SearchOutcome.FOUND, deadline.elapsed())

        if candidate_threats > current_threats:
            p = acceptance_probability(current_threats, candidate_threats, alpha)
            if not rng.random() <= p:
                board[row] = previous
                continue

        current_threats = candidate_threats
        moves += 1

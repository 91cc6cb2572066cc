"""Exhaustive depth-first search for the N-Queens problem.

This module implements a non-recursive DFS backed by an explicit
:class:`~queensearch.stack.SearchStack` of placement snapshots:

- solve_dfs(size, max_time): pop a partial placement, extend it by one queen
    in the next row for every column (N-1 down to 0), push every extension
    that keeps the board threat-free, and stop at the first full placement.

Contract (public API)
---------------------
- Input: ``size >= 1`` and ``max_time`` (seconds, ``>= 0``).
- Output: ``DFSResult(solution, outcome, nodes_explored, elapsed)`` where
    - ``solution`` is a full placement on ``FOUND`` and ``None`` otherwise.
    - ``outcome`` is ``FOUND``, ``EXHAUSTED`` (no solution exists, e.g. N = 2
      or N = 3) or ``TIMEOUT``.
    - ``nodes_explored`` counts candidate extensions whose threats were
      counted.
    - ``elapsed`` is wall-clock time measured via ``perf_counter()``.
- Determinism: the column order is fixed, so equal inputs always yield the
    same solution. DFS never consults a random generator.
- Timeouts: the deadline is polled after every pop and around every threat
    count; on expiry the popped placement is discarded and every snapshot
    still held by the stack is released.

Complexity
----------
Exponential in the worst case. Each extension recounts threats over all
placed queens (O(k^2)), so a timeout overruns by at most one count.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from .stack import SearchStack
from .utils import (
    Coordinate,
    Deadline,
    Placement,
    SearchOutcome,
    check_problem_size,
    count_threats,
)


class DFSResult(NamedTuple):
    solution: Optional[Placement]
    outcome: SearchOutcome
    nodes_explored: int
    elapsed: float


def solve_dfs(size: int, max_time: float) -> DFSResult:
    """Find one solution by exhaustive backtracking over an explicit stack.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 1).
    max_time : float
        Wall-clock budget in seconds. A budget of 0 expires immediately.

    Returns
    -------
    DFSResult
        See module-level contract.

    Raises
    ------
    ValueError
        If ``size < 1`` or ``max_time < 0``.
    AllocationFailure
        If a snapshot cannot be stored; the stack is released before raising.
    """
    check_problem_size(size)
    deadline = Deadline(max_time)
    explored = 0

    with SearchStack() as stack:
        # Root state: the empty board.
        stack.push([], 0)

        while not stack.is_empty():
            placement, queen_amount = stack.pop()

            if deadline.expired():
                # The popped snapshot is dropped; close() releases the rest.
                return DFSResult(None, SearchOutcome.TIMEOUT, explored, deadline.elapsed())

            # Reuse the popped snapshot as the buffer for the next row.
            placement.append(Coordinate(queen_amount, 0))
            # Once every column is tried this snapshot is never revisited.
            for column in range(size - 1, -1, -1):
                if deadline.expired():
                    return DFSResult(None, SearchOutcome.TIMEOUT, explored, deadline.elapsed())

                placement[queen_amount] = Coordinate(queen_amount, column)
                threats = count_threats(placement, queen_amount + 1)
                explored += 1

                if deadline.expired():
                    return DFSResult(None, SearchOutcome.TIMEOUT, explored, deadline.elapsed())

                if threats == 0:
                    if queen_amount + 1 == size:
                        return DFSResult(placement, SearchOutcome.FOUND, explored, deadline.elapsed())
                    stack.push(placement, queen_amount + 1)

    return DFSResult(None, SearchOutcome.EXHAUSTED, explored, deadline.elapsed())

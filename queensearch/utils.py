"""Utility helpers shared by every queensearch solver.

This module holds the low-level primitives the search strategies depend upon:
the coordinate/placement representation, the threat counter used as the
single objective function, and the wall-clock deadline polled by all solvers.

Representation
--------------
A placement is an ordered list of ``Coordinate(row, column)`` entries where the
i-th entry always occupies row ``i``. A placement of length N is a candidate
solution; it is a true solution when ``count_threats`` returns 0.
"""

from __future__ import annotations

from enum import Enum
from time import perf_counter
from typing import Iterable, List, NamedTuple, Optional, Sequence


class Coordinate(NamedTuple):
    """Zero-based board square occupied by a queen."""

    row: int
    column: int


Placement = List[Coordinate]


class SearchOutcome(str, Enum):
    """Why a solver stopped."""

    FOUND = "found"
    EXHAUSTED = "exhausted"
    TIMEOUT = "timeout"


def count_threats(placement: Sequence[Coordinate], queen_amount: Optional[int] = None) -> int:
    """Count unordered pairs of queens that attack each other in O(k^2).

    Parameters
    ----------
    placement : Sequence[Coordinate]
        Queens placed so far (partial or full placement).
    queen_amount : int | None
        Only the first ``queen_amount`` entries are considered. Defaults to
        the whole sequence.

    Returns
    -------
    int
        Number of pairs sharing a row, a column, or a diagonal. Returns 0 for
        fewer than two queens.
    """
    k = len(placement) if queen_amount is None else queen_amount
    if k <= 1:
        return 0

    threats = 0
    for i in range(k):
        row_i, column_i = placement[i]
        for j in range(i + 1, k):
            row_j, column_j = placement[j]
            # Rows are unique by construction; the row test is kept anyway.
            if row_i == row_j or column_i == column_j or abs(row_i - row_j) == abs(column_i - column_j):
                threats += 1
    return threats


def is_valid_solution(placement: Optional[Sequence[Coordinate]], size: int) -> bool:
    """Return True if ``placement`` is a full, conflict-free board of ``size``.

    Contract
    - Exactly ``size`` entries, entry i on row i.
    - Every column in ``[0, size)``.
    - ``count_threats(placement) == 0``.
    """
    if placement is None or size < 1 or len(placement) != size:
        return False
    for index, (row, column) in enumerate(placement):
        if row != index:
            return False
        if not isinstance(column, int) or column < 0 or column >= size:
            return False
    return count_threats(placement) == 0


def columns_of(placement: Sequence[Coordinate]) -> List[int]:
    """Return the column of each row, in row order."""
    return [column for _, column in placement]


def placement_from_columns(columns: Iterable[int]) -> Placement:
    """Build a placement from a column-per-row listing (``[1, 3, 0, 2]``)."""
    return [Coordinate(row, column) for row, column in enumerate(columns)]


def render_board(placement: Sequence[Coordinate], size: int) -> str:
    """Render a placement as text, one board row per line (``Q`` marks a queen)."""
    lines = []
    for row in range(size):
        column = placement[row].column
        lines.append("".join("Q " if col == column else "+ " for col in range(size)).rstrip())
    return "\n".join(lines)


class Deadline:
    """Wall-clock budget started at construction time.

    Solvers poll :meth:`expired` at fixed checkpoints; there is no
    asynchronous interruption, so the worst-case overrun is one threat count.
    """

    def __init__(self, budget_seconds: float):
        if budget_seconds < 0:
            raise ValueError(f"Time budget must be non-negative, got {budget_seconds}")
        self.budget = budget_seconds
        self.start = perf_counter()

    def elapsed(self) -> float:
        return perf_counter() - self.start

    def expired(self) -> bool:
        return self.elapsed() >= self.budget


def check_problem_size(size: int) -> None:
    """Raise ``ValueError`` unless ``size`` is a positive board dimension."""
    if size < 1:
        raise ValueError(f"Board size must be >= 1, got {size}")

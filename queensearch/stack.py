"""Explicit LIFO container of placement snapshots backing the DFS solver.

Frames form a singly linked chain: the stack owns the top frame and each frame
owns the next one. ``push`` deep-copies the caller's placement into a new
frame, ``pop`` hands the snapshot back to the caller and drops the frame, and
``close`` walks whatever is left so that early exits (timeouts) release every
remaining snapshot.

Contract (public API)
---------------------
- ``SearchStack()``: an open, empty stack (size 0).
- ``push(placement, length)``: copy ``placement[:length]`` onto the top.
  Raises ``AllocationFailure`` when the stack is closed or the copy fails.
- ``pop()``: return ``(placement, length)`` of the top frame.
  Raises ``EmptyOrInvalid`` when the stack is empty or closed.
- ``is_empty()``: True iff size is 0. Raises ``EmptyOrInvalid`` when closed.
- ``close()``: release all frames; returns how many were released.

The stack is a context manager; leaving the ``with`` block closes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .exceptions import AllocationFailure, EmptyOrInvalid
from .utils import Coordinate, Placement


@dataclass
class _StackFrame:
    """One owned placement snapshot and the link to the frame below it."""

    placement: Optional[Placement]
    length: int
    next: Optional["_StackFrame"] = None


class SearchStack:
    """Singly linked stack of placement snapshots."""

    def __init__(self) -> None:
        self._top: Optional[_StackFrame] = None
        self._size = 0
        self._open = True

    def __enter__(self) -> "SearchStack":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __len__(self) -> int:
        return self._size

    @property
    def closed(self) -> bool:
        return not self._open

    def push(self, placement: Sequence[Coordinate], length: int) -> None:
        """Copy the first ``length`` coordinates of ``placement`` onto the top."""
        if not self._open:
            raise AllocationFailure("Cannot push onto a closed stack")
        if length < 0 or length > len(placement):
            raise ValueError(f"Invalid snapshot length {length} for a placement of {len(placement)} queens")
        try:
            # Coordinates are immutable tuples, so a fresh list is a deep copy.
            snapshot: Placement = [Coordinate(row, column) for row, column in placement[:length]]
            frame = _StackFrame(snapshot, length, self._top)
        except MemoryError as exc:
            raise AllocationFailure(f"Could not copy a placement of {length} queens") from exc
        self._top = frame
        self._size += 1

    def pop(self) -> Tuple[Placement, int]:
        """Remove the top frame and transfer its snapshot to the caller."""
        if not self._open:
            raise EmptyOrInvalid("Cannot pop from a closed stack")
        frame = self._top
        if frame is None or frame.placement is None:
            raise EmptyOrInvalid("Cannot pop from an empty stack")

        placement, length = frame.placement, frame.length
        self._top = frame.next
        self._size -= 1
        # Detach so the frame no longer references the transferred snapshot.
        frame.placement = None
        frame.next = None
        return placement, length

    def is_empty(self) -> bool:
        if not self._open:
            raise EmptyOrInvalid("Stack is closed")
        return self._size == 0

    def close(self) -> int:
        """Release every remaining frame and its snapshot.

        Returns
        -------
        int
            Number of frames released by the walk (0 when already closed).
        """
        released = 0
        frame = self._top
        while frame is not None:
            following = frame.next
            frame.placement = None
            frame.next = None
            frame = following
            released += 1
        self._top = None
        self._size = 0
        self._open = False
        return released

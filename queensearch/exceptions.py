"""Exceptions raised by the queensearch containers and solvers."""

from __future__ import annotations


class QueenSearchError(Exception):
    """Base class for queensearch errors."""


class AllocationFailure(QueenSearchError):
    """Storage for a placement snapshot or stack frame could not be obtained.

    Also raised when pushing onto a stack that has been closed.
    """


class EmptyOrInvalid(QueenSearchError):
    """Pop from an empty stack, or any access to a closed stack."""

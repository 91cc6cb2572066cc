"""Tests for the stack-based depth-first search."""

from pathlib import Path
import sys
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch import backtracking
from queensearch.backtracking import solve_dfs
from queensearch.exceptions import AllocationFailure
from queensearch.stack import SearchStack
from queensearch.utils import SearchOutcome, columns_of, count_threats, is_valid_solution


class DfsTests(unittest.TestCase):

    def test_single_queen(self):
        result = solve_dfs(1, 1)
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertEqual(columns_of(result.solution), [0])

    def test_four_queens_first_solution_in_descending_column_order(self):
        result = solve_dfs(4, 1)
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertEqual(columns_of(result.solution), [1, 3, 0, 2])
        self.assertEqual(count_threats(result.solution), 0)
        self.assertGreater(result.nodes_explored, 0)

    def test_unsolvable_boards_are_exhausted(self):
        for size in (2, 3):
            with self.subTest(size=size):
                result = solve_dfs(size, 2)
                self.assertIsNone(result.solution)
                self.assertEqual(result.outcome, SearchOutcome.EXHAUSTED)

    def test_eight_queens(self):
        result = solve_dfs(8, 10)
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertTrue(is_valid_solution(result.solution, 8))

    def test_deterministic(self):
        self.assertEqual(solve_dfs(6, 5).solution, solve_dfs(6, 5).solution)

    def test_zero_budget_times_out_promptly(self):
        result = solve_dfs(50, 0)
        self.assertIsNone(result.solution)
        self.assertEqual(result.outcome, SearchOutcome.TIMEOUT)
        self.assertEqual(result.nodes_explored, 0)
        self.assertLess(result.elapsed, 1.0)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            solve_dfs(0, 1)
        with self.assertRaises(ValueError):
            solve_dfs(4, -1)

    def test_stack_is_released_on_timeout(self):
        stacks = []

        class RecordingStack(SearchStack):
            def __init__(self):
                super().__init__()
                stacks.append(self)

        # Budget expires after a few polls, mid-search with frames still held.
        polls = iter([False] * 12)
        with mock.patch.object(backtracking, "SearchStack", RecordingStack), \
                mock.patch.object(backtracking.Deadline, "expired", lambda self: next(polls, True)):
            result = solve_dfs(8, 10)

        self.assertEqual(result.outcome, SearchOutcome.TIMEOUT)
        self.assertEqual(len(stacks), 1)
        self.assertTrue(stacks[0].closed)
        self.assertEqual(len(stacks[0]), 0)

    def test_allocation_failure_propagates_after_release(self):
        stacks = []

        class FailingStack(SearchStack):
            def __init__(self):
                super().__init__()
                stacks.append(self)

            def push(self, placement, length):
                if length > 1:
                    raise AllocationFailure("no storage")
                super().push(placement, length)

        with mock.patch.object(backtracking, "SearchStack", FailingStack):
            with self.assertRaises(AllocationFailure):
                solve_dfs(6, 5)
        self.assertTrue(stacks[0].closed)


if __name__ == "__main__":
    unittest.main()

"""Tests for the fixed-acceptance simulated annealing solver."""

from pathlib import Path
import math
import sys
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch import simulated_annealing
from queensearch.simulated_annealing import DEFAULT_ALPHA, acceptance_probability, solve_annealing
from queensearch.utils import SearchOutcome, columns_of, count_threats, is_valid_solution


class ScriptedRandom:
    """Stand-in generator replaying fixed ``randrange`` and ``random`` draws."""

    def __init__(self, integers, floats):
        self.integers = list(integers)
        self.floats = list(floats)

    def randrange(self, stop):
        value = self.integers.pop(0)
        assert 0 <= value < stop
        return value

    def random(self):
        return self.floats.pop(0)


class AnnealingTests(unittest.TestCase):

    def test_single_queen(self):
        result = solve_annealing(1, 1, 7)
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertEqual(result.moves, 1)
        self.assertEqual(count_threats(result.solution), 0)

    def test_four_queens(self):
        result = solve_annealing(4, 5, 11)
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertTrue(is_valid_solution(result.solution, 4))

    def test_eight_queens_with_fixed_seed(self):
        result = solve_annealing(8, 10, 42)
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertTrue(is_valid_solution(result.solution, 8))
        self.assertGreater(result.moves, 0)

    def test_same_seed_replays_the_same_search(self):
        first = solve_annealing(8, 10, 99)
        second = solve_annealing(8, 10, 99)
        self.assertEqual(first.solution, second.solution)
        self.assertEqual(first.moves, second.moves)

    def test_zero_budget_times_out_promptly(self):
        result = solve_annealing(50, 0, 1)
        self.assertIsNone(result.solution)
        self.assertEqual(result.outcome, SearchOutcome.TIMEOUT)
        self.assertEqual(result.moves, 50)

    def test_unsolvable_board_runs_until_the_deadline(self):
        result = solve_annealing(2, 1, 5)
        self.assertIsNone(result.solution)
        self.assertEqual(result.outcome, SearchOutcome.TIMEOUT)

    def scripted_run(self, integers, floats):
        script = ScriptedRandom(integers, floats)
        with mock.patch.object(simulated_annealing.random, "Random", lambda seed: script):
            result = solve_annealing(4, 5, 0)
        self.assertEqual(script.integers, [])
        self.assertEqual(script.floats, [])
        return result

    def test_rejected_worse_move_is_reverted(self):
        # Start [1, 3, 0, 0] (1 threat); row 0 -> column 0 gives 3 threats.
        result = self.scripted_run([1, 3, 0, 0, 0, 0, 3, 2], [0.9])
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertEqual(columns_of(result.solution), [1, 3, 0, 2])
        self.assertEqual(result.moves, 4)

    def test_accepted_worse_move_is_kept(self):
        result = self.scripted_run([1, 3, 0, 0, 0, 0, 0, 1, 3, 2], [0.0])
        self.assertEqual(result.outcome, SearchOutcome.FOUND)
        self.assertEqual(columns_of(result.solution), [1, 3, 0, 2])
        self.assertEqual(result.moves, 6)

    def test_acceptance_probability(self):
        self.assertAlmostEqual(acceptance_probability(3, 5), DEFAULT_ALPHA * math.exp(-2))
        self.assertAlmostEqual(acceptance_probability(4, 4, alpha=0.5), 0.5)
        self.assertLess(acceptance_probability(2, 9), acceptance_probability(2, 3))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            solve_annealing(0, 1, 1)
        with self.assertRaises(ValueError):
            solve_annealing(4, -2, 1)


if __name__ == "__main__":
    unittest.main()

"""Tests for the command-line dispatch and result formatting."""

import contextlib
import io
import json
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch.analysis import cli, settings
from queensearch.backtracking import solve_dfs
from queensearch.utils import SearchOutcome, columns_of


class CliTests(unittest.TestCase):

    def setUp(self):
        self.saved = {name: getattr(settings, name) for name in ("MAX_TIME", "SEED", "ANNEALING_ALPHA")}
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config = Path(self.tmpdir.name) / "config.json"
        self.config.write_text(json.dumps({"solver_settings": {"max_time": 5, "seed": None}}))

    def tearDown(self):
        for name, value in self.saved.items():
            setattr(settings, name, value)
        self.tmpdir.cleanup()

    def run_main(self, *argv):
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            cli.main(["--config", str(self.config), *argv])
        return buffer.getvalue()

    def test_parse_algorithm_filters(self):
        self.assertIsNone(cli.parse_algorithm_filters(None))
        self.assertEqual(cli.parse_algorithm_filters(["dfs,hill", "HILL", "ann"]), ["DFS", "HILL", "ANN"])
        with self.assertRaises(ValueError):
            cli.parse_algorithm_filters(["GA"])

    def test_solve_dispatch(self):
        self.assertEqual(columns_of(cli.solve("dfs", 4, 2).solution), [1, 3, 0, 2])
        self.assertEqual(cli.solve("hill", 1, 2, seed=3).restarts, 0)
        self.assertEqual(cli.solve("ann", 1, 2, seed=3).moves, 1)

    def test_solve_rejects_bad_requests(self):
        with self.assertRaises(ValueError):
            cli.solve("dfs", 0, 2)
        with self.assertRaises(ValueError):
            cli.solve("dfs", 4, 2, seed=1)
        with self.assertRaises(ValueError):
            cli.solve("ga", 4, 2, seed=1)

    def test_format_found_and_missing(self):
        found = cli.format_result(solve_dfs(4, 2), 4)
        self.assertTrue(found.startswith("SOLUTION FOUND"))
        self.assertIn("+ Q + +", found)
        self.assertNotIn("Restarts", found)
        self.assertIn("Queen columns by row: [1, 3, 0, 2]", found)

        self.assertEqual(cli.format_result(solve_dfs(3, 2), 3), "NO SOLUTION FOUND (search space exhausted)")
        self.assertEqual(cli.format_result(solve_dfs(20, 0), 20), "NO SOLUTION FOUND (time limit reached)")

    def test_main_dfs(self):
        output = self.run_main("--alg", "dfs", "-n", "4", "--maxtime", "2")
        self.assertIn("SOLUTION FOUND", output)
        self.assertIn("Q + + +", output)

    def test_main_hill_reports_counters(self):
        output = self.run_main("--alg", "hill", "-n", "6", "--maxtime", "5", "--seed", "4", "--validate")
        self.assertIn("Restarts made to solve the problem:", output)
        self.assertIn("Queens placed or moved to solve the problem:", output)

    def test_main_ann_reports_moves(self):
        output = self.run_main("--alg", "ann", "-n", "5", "--maxtime", "5", "--seed", "4")
        self.assertIn("Queens placed or moved to solve the problem:", output)
        self.assertNotIn("Restarts", output)

    def test_single_solve_does_not_echo_timeouts(self):
        self.config.write_text(json.dumps({
            "solver_settings": {"max_time": 5, "seed": None},
            "timeout_settings": {"dfs_time_limit": 1, "hill_time_limit": 1, "ann_time_limit": 1},
        }))
        saved = (settings.DFS_TIME_LIMIT, settings.HILL_TIME_LIMIT, settings.ANN_TIME_LIMIT)
        try:
            output = self.run_main("--alg", "dfs", "-n", "4", "--maxtime", "2")
        finally:
            settings.DFS_TIME_LIMIT, settings.HILL_TIME_LIMIT, settings.ANN_TIME_LIMIT = saved
        self.assertTrue(output.startswith("SOLUTION FOUND"))
        self.assertNotIn("Timeout settings configured", output)

    def test_main_no_solution(self):
        output = self.run_main("--alg", "dfs", "-n", "2", "--maxtime", "2")
        self.assertIn("NO SOLUTION FOUND", output)

    def test_main_errors_exit_with_status_1(self):
        for argv in (["--alg", "dfs", "-n", "4", "--seed", "1"], ["--alg", "hill", "-n", "0"]):
            with self.subTest(argv=argv):
                with self.assertRaises(SystemExit) as ctx:
                    self.run_main(*argv)
                self.assertEqual(ctx.exception.code, 1)

    def test_main_missing_config(self):
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer), self.assertRaises(SystemExit) as ctx:
            cli.main(["--config", str(Path(self.tmpdir.name) / "absent.json"), "-n", "4"])
        self.assertEqual(ctx.exception.code, 1)

    def test_seed_falls_back_to_clock(self):
        result = cli.solve("ann", 4, 5)
        self.assertEqual(result.outcome, SearchOutcome.FOUND)


if __name__ == "__main__":
    unittest.main()

"""Command-line interface and high-level pipelines for queensearch.

This module wires together configuration loading, single solver runs,
benchmark suites and the quick regression check. It isolates I/O, argument
parsing, and progress reporting from the core algorithmic modules so that the
rest of the codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
import time
from pathlib import Path
from typing import List, Optional, Sequence, Union

from . import settings
from .experiments import ALGORITHMS, run_experiments
from .reporting import save_raw_data_to_csv, save_results_to_csv
from config_manager import ConfigManager
from queensearch.backtracking import DFSResult, solve_dfs
from queensearch.exceptions import QueenSearchError
from queensearch.hill_climbing import HillClimbResult, solve_hill_climb
from queensearch.simulated_annealing import AnnealingResult, solve_annealing
from queensearch.utils import SearchOutcome, columns_of, is_valid_solution, render_board

SolveResult = Union[DFSResult, HillClimbResult, AnnealingResult]

DEFAULT_CONFIG = "config.json"


# ------------- Utils --------------------------------------------------------

def parse_algorithm_filters(alg_args: Optional[List[str]]):
    """Normalize benchmark algorithm filters into a list of labels.

    Accepts repeated flags and comma-separated lists. Valid values: DFS, HILL,
    ANN. Returns None when no filter is provided (meaning all are enabled).
    """
    if not alg_args:
        return None
    selected: List[str] = []
    for entry in alg_args:
        for token in entry.split(","):
            token = token.strip().upper()
            if token:
                if token not in ALGORITHMS:
                    raise ValueError(f"Unknown algorithm '{token}'. Allowed: {', '.join(ALGORITHMS)}")
                selected.append(token)
    unique = list(dict.fromkeys(selected))  # preserve order, remove dups
    return unique or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and update the global ``settings`` module in-place."""
    config_mgr = ConfigManager(config_path)

    solver_settings = config_mgr.get_solver_settings()
    if solver_settings:
        settings.MAX_TIME = float(solver_settings.get("max_time", settings.MAX_TIME))
        seed = solver_settings.get("seed", settings.SEED)
        settings.SEED = None if seed is None else int(seed)
        settings.ANNEALING_ALPHA = float(solver_settings.get("annealing_alpha", settings.ANNEALING_ALPHA))

    timeout_settings = config_mgr.get_timeout_settings()
    if timeout_settings:
        settings.set_timeouts(
            dfs_timeout=timeout_settings.get("dfs_time_limit", settings.DFS_TIME_LIMIT),
            hill_timeout=timeout_settings.get("hill_time_limit", settings.HILL_TIME_LIMIT),
            ann_timeout=timeout_settings.get("ann_time_limit", settings.ANN_TIME_LIMIT),
            verbose=False,
        )

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        settings.RUNS_HILL = int(experiment_settings.get("runs_hill", settings.RUNS_HILL))
        settings.RUNS_ANN = int(experiment_settings.get("runs_ann", settings.RUNS_ANN))
        settings.RUNS_DFS = int(experiment_settings.get("runs_dfs", settings.RUNS_DFS))
        settings.BASE_SEED = int(experiment_settings.get("base_seed", settings.BASE_SEED))
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)

    if settings.MAX_TIME < 0:
        raise ValueError(f"max_time must be non-negative, got {settings.MAX_TIME}")
    return config_mgr


def clock_seed() -> int:
    """Derive a seed from the clock when none was given."""
    return time.time_ns() % (2 ** 31)


# ------------- Single solve -------------------------------------------------

def solve(algorithm: str, size: int, max_time: float, seed: Optional[int] = None, alpha: Optional[float] = None) -> SolveResult:
    """Dispatch one solve to the selected algorithm ('dfs', 'hill' or 'ann')."""
    if size == 0:
        raise ValueError("Queens can't be zero")
    if algorithm == "dfs":
        if seed is not None:
            raise ValueError("DFS algorithm can't take a seed argument")
        return solve_dfs(size, max_time)
    if seed is None:
        seed = clock_seed()
    if algorithm == "hill":
        return solve_hill_climb(size, max_time, seed)
    if algorithm == "ann":
        return solve_annealing(size, max_time, seed, alpha=settings.ANNEALING_ALPHA if alpha is None else alpha)
    raise ValueError(f"Unknown algorithm '{algorithm}'. Allowed: dfs, hill, ann")


def format_result(result: SolveResult, size: int) -> str:
    """Render a solve result the way the CLI prints it."""
    if result.solution is None:
        reason = "search space exhausted" if result.outcome is SearchOutcome.EXHAUSTED else "time limit reached"
        return f"NO SOLUTION FOUND ({reason})"

    lines = ["SOLUTION FOUND", "", render_board(result.solution, size), ""]
    lines.append(f"Queen columns by row: {columns_of(result.solution)}")
    lines.append(f"Time spent: {result.elapsed:f} secs")
    if isinstance(result, HillClimbResult):
        lines.append(f"Restarts made to solve the problem: {result.restarts}")
    if isinstance(result, (HillClimbResult, AnnealingResult)):
        lines.append(f"Queens placed or moved to solve the problem: {result.moves}")
    return "\n".join(lines)


def run_single(
    algorithm: str,
    size: int,
    max_time: float,
    seed: Optional[int] = None,
    validate: bool = False,
) -> SolveResult:
    """Solve once, print the board and counters, and return the result."""
    result = solve(algorithm, size, max_time, seed)
    if validate and result.solution is not None and not is_valid_solution(result.solution, size):
        raise AssertionError(f"{algorithm} returned an invalid solution for N={size}: {result.solution}")
    print(format_result(result, size))
    return result


# ------------- Benchmark pipeline ------------------------------------------

def run_benchmark(algorithms: Optional[List[str]] = None, validate: bool = False, plots: bool = True) -> None:
    """Run the configured benchmark suite and write CSV summaries and charts."""
    print("Configured time budgets:")
    print(f"   - DFS: {settings.DFS_TIME_LIMIT}s")
    print(f"   - Hill climbing: {settings.HILL_TIME_LIMIT}s")
    print(f"   - Annealing: {settings.ANN_TIME_LIMIT}s")

    start_total = time.perf_counter()
    results = run_experiments(
        settings.N_VALUES,
        runs_hill=settings.RUNS_HILL,
        runs_ann=settings.RUNS_ANN,
        base_seed=settings.BASE_SEED,
        runs_dfs=settings.RUNS_DFS,
        algorithms=algorithms,
        validate=validate,
        progress_label="Benchmark",
    )

    save_results_to_csv(results, settings.N_VALUES, settings.OUT_DIR)
    save_raw_data_to_csv(results, settings.N_VALUES, settings.OUT_DIR)
    if plots:
        from .plots import plot_and_save

        plot_and_save(results, settings.N_VALUES, settings.OUT_DIR)

    total_time = time.perf_counter() - start_total
    print(f"\nBenchmark completed in {total_time:.1f}s")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of all solvers.

    Verifies that:
    - DFS finds a valid N=8 solution and exhausts N=3.
    - Hill climbing and annealing succeed for N=8 under a fixed seed.
    - The benchmark pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests (N=8) across all algorithms...")

    dfs = solve_dfs(8, 5)
    if dfs.outcome is not SearchOutcome.FOUND or not is_valid_solution(dfs.solution, 8):
        raise AssertionError(f"DFS failed to find a valid solution for N=8: {dfs}")
    print(f"  [DFS] solution found, nodes={dfs.nodes_explored}, time={dfs.elapsed:.4f}s")

    exhausted = solve_dfs(3, 5)
    if exhausted.outcome is not SearchOutcome.EXHAUSTED:
        raise AssertionError(f"DFS should exhaust N=3, got {exhausted.outcome.value}")
    print("  [DFS] N=3 exhausted as expected")

    hill = solve_hill_climb(8, 10, 42)
    if not is_valid_solution(hill.solution, 8):
        raise AssertionError("Hill climbing did not succeed for N=8 with deterministic seed.")
    print(f"  Hill climbing: success in {hill.elapsed:.4f}s, restarts={hill.restarts}, moves={hill.moves}")

    ann = solve_annealing(8, 10, 42)
    if not is_valid_solution(ann.solution, 8):
        raise AssertionError("Simulated Annealing did not succeed for N=8 with deterministic seed.")
    print(f"  Simulated Annealing: success in {ann.elapsed:.4f}s, moves={ann.moves}")

    results = run_experiments(
        [8],
        runs_hill=2,
        runs_ann=2,
        dfs_time_limit=5,
        hill_time_limit=5,
        ann_time_limit=5,
        validate=True,
        progress_label="Quick regression experiments",
    )

    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_results_to_csv(results, [8], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Place N non-attacking queens with DFS, hill climbing or simulated annealing.")
    parser.add_argument(
        "--alg",
        choices=["dfs", "hill", "ann"],
        default="dfs",
        help="Search strategy: dfs (exhaustive), hill (hill climbing with restarts) or ann (simulated annealing).",
    )
    parser.add_argument("-n", "--queens", type=int, help="Board size N (number of queens).")
    parser.add_argument("--maxtime", type=int, help="Time budget in whole seconds (default from configuration).")
    parser.add_argument("--seed", type=int, help="Random seed for hill/ann (default: derived from the clock).")
    parser.add_argument("--config", default=None, help=f"Path to configuration file (default: {DEFAULT_CONFIG} if present).")
    parser.add_argument(
        "--bench-alg",
        action="append",
        help="Filter benchmark algorithms: DFS, HILL, ANN (comma-separated or multiple flags). Default: all.",
    )
    parser.add_argument("--benchmark", action="store_true", help="Run the benchmark suite over the configured N values.")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation in benchmark mode.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests (N=8) and exit.")
    parser.add_argument("--validate", action="store_true", help="Re-check every returned solution (extra assertions).")
    return parser


def _load_configuration(config_path: Optional[str]) -> None:
    if config_path is not None:
        apply_configuration(config_path)
    elif Path(DEFAULT_CONFIG).exists():
        apply_configuration(DEFAULT_CONFIG)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        _load_configuration(args.config)
        bench_filter = parse_algorithm_filters(args.bench_alg)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    try:
        if args.benchmark:
            run_benchmark(bench_filter, validate=args.validate, plots=not args.no_plots)
            return

        if args.queens is None:
            parser.error("the number of queens (-n/--queens) is required unless --benchmark or --quick-test is given")
        if args.queens < 0 or (args.maxtime is not None and args.maxtime < 0):
            raise ValueError("N and maxtime must be non-negative integers")
        max_time = settings.MAX_TIME if args.maxtime is None else args.maxtime
        seed = args.seed if args.seed is not None or args.alg == "dfs" else settings.SEED
        run_single(args.alg, args.queens, max_time, seed, validate=args.validate)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except (ValueError, QueenSearchError) as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc

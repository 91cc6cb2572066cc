"""Benchmark runners for DFS, hill climbing and simulated annealing.

These routines execute repeatable batches of solver runs over a set of board
sizes. DFS is deterministic and runs ``runs_dfs`` times per N; the stochastic
solvers run once per seed ``base_seed + i``.

Outputs are structured dictionaries suitable for CSV export and plotting.
The optional validation hook re-checks every returned solution.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from . import settings
from .stats import (
    ExperimentResults,
    ProgressPrinter,
    RunRecord,
    compute_grouped_statistics,
)
from queensearch.backtracking import solve_dfs
from queensearch.hill_climbing import solve_hill_climb
from queensearch.simulated_annealing import solve_annealing
from queensearch.utils import Placement, SearchOutcome, is_valid_solution

ALGORITHMS = ("DFS", "HILL", "ANN")


def _record(
    size: int,
    solution: Optional[Placement],
    outcome: SearchOutcome,
    elapsed: float,
    validate: bool,
    label: str,
) -> RunRecord:
    if validate and solution is not None and not is_valid_solution(solution, size):
        raise AssertionError(f"{label} returned an invalid solution for N={size}: {solution}")
    return {
        "success": outcome is SearchOutcome.FOUND,
        "timeout": outcome is SearchOutcome.TIMEOUT,
        "outcome": outcome.value,
        "time": elapsed,
    }


def run_dfs_once(size: int, time_limit: float, validate: bool = False) -> RunRecord:
    """Run a single DFS and shape its result as a run record."""
    result = solve_dfs(size, time_limit)
    record = _record(size, result.solution, result.outcome, result.elapsed, validate, "DFS")
    record["nodes"] = result.nodes_explored
    return record


def run_hill_once(size: int, time_limit: float, seed: int, validate: bool = False) -> RunRecord:
    """Run a single seeded hill climb and shape its result as a run record."""
    result = solve_hill_climb(size, time_limit, seed)
    record = _record(size, result.solution, result.outcome, result.elapsed, validate, "Hill climbing")
    record["moves"] = result.moves
    record["restarts"] = result.restarts
    record["seed"] = seed
    return record


def run_ann_once(
    size: int,
    time_limit: float,
    seed: int,
    alpha: float = 0.001,
    validate: bool = False,
) -> RunRecord:
    """Run a single seeded annealing search and shape its result as a run record."""
    result = solve_annealing(size, time_limit, seed, alpha=alpha)
    record = _record(size, result.solution, result.outcome, result.elapsed, validate, "Annealing")
    record["moves"] = result.moves
    record["seed"] = seed
    return record


def run_experiments(
    N_values: List[int],
    runs_hill: int,
    runs_ann: int,
    base_seed: int = 42,
    runs_dfs: int = 1,
    dfs_time_limit: Optional[float] = None,
    hill_time_limit: Optional[float] = None,
    ann_time_limit: Optional[float] = None,
    alpha: Optional[float] = None,
    algorithms: Optional[List[str]] = None,
    validate: bool = False,
    progress_label: str = "Experiments",
) -> ExperimentResults:
    """Run every selected solver over ``N_values`` and aggregate per N.

    Parameters
    ----------
    N_values : List[int]
        Board sizes, in the order they should run.
    runs_hill, runs_ann : int
        Seeded runs per N for the stochastic solvers.
    base_seed : int
        Run ``i`` uses seed ``base_seed + i``.
    runs_dfs : int
        DFS repetitions per N (timing only; the result never changes).
    dfs_time_limit, hill_time_limit, ann_time_limit : float | None
        Per-run budgets; ``None`` falls back to ``settings``.
    alpha : float | None
        Annealing acceptance constant; ``None`` falls back to ``settings``.
    algorithms : List[str] | None
        Subset of ``ALGORITHMS``; ``None`` runs all three.
    validate : bool
        Re-check every returned solution and raise ``AssertionError`` on an
        invalid one.

    Returns
    -------
    ExperimentResults
        ``{"DFS": {N: entry}, "HILL": {...}, "ANN": {...}}`` where each entry
        holds grouped statistics plus the ``raw_runs`` records.
    """
    selected = list(algorithms) if algorithms else list(ALGORITHMS)
    unknown = [label for label in selected if label not in ALGORITHMS]
    if unknown:
        raise ValueError(f"Unknown algorithm(s) {', '.join(unknown)}. Allowed: {', '.join(ALGORITHMS)}")
    dfs_limit = settings.DFS_TIME_LIMIT if dfs_time_limit is None else dfs_time_limit
    hill_limit = settings.HILL_TIME_LIMIT if hill_time_limit is None else hill_time_limit
    ann_limit = settings.ANN_TIME_LIMIT if ann_time_limit is None else ann_time_limit
    ann_alpha = settings.ANNEALING_ALPHA if alpha is None else alpha

    runners: Dict[str, Callable[[int, int], RunRecord]] = {
        "DFS": lambda N, i: run_dfs_once(N, dfs_limit, validate),
        "HILL": lambda N, i: run_hill_once(N, hill_limit, base_seed + i, validate),
        "ANN": lambda N, i: run_ann_once(N, ann_limit, base_seed + i, ann_alpha, validate),
    }
    run_counts = {"DFS": runs_dfs, "HILL": runs_hill, "ANN": runs_ann}

    results: ExperimentResults = {"DFS": {}, "HILL": {}, "ANN": {}}
    progress = ProgressPrinter(len(N_values), progress_label)

    for index, N in enumerate(N_values, start=1):
        progress.update(index, f"N={N}")
        for label in selected:
            records = [runners[label](N, i) for i in range(run_counts[label])]
            entry = compute_grouped_statistics(records)
            entry["raw_runs"] = records
            results[label][N] = entry  # type: ignore[assignment]
            print(
                f"  {label}: {entry['successes']}/{entry['total_runs']} solved, "
                f"{entry['timeouts']} timeouts"
            )

    return results

"""Typed result shapes and statistics helpers for the benchmark pipeline.

Defines ``TypedDict`` structures for experiment outputs and provides utilities
to compute aggregate statistics across per-run records.
"""
from __future__ import annotations

import statistics
from typing import Any, Dict, List, Optional, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict, total=False):
    success: bool
    timeout: bool
    outcome: str
    time: float
    nodes: int
    moves: int
    restarts: int
    seed: int


class AlgorithmEntry(TypedDict, total=False):
    success_rate: float
    timeout_rate: float
    failure_rate: float
    total_runs: int
    successes: int
    failures: int
    timeouts: int
    all_time: StatsSummary
    success_time: StatsSummary
    success_moves: StatsSummary
    success_nodes: StatsSummary
    success_restarts: StatsSummary
    raw_runs: List[RunRecord]


class ExperimentResults(TypedDict):
    DFS: Dict[int, AlgorithmEntry]
    HILL: Dict[int, AlgorithmEntry]
    ANN: Dict[int, AlgorithmEntry]


METRICS = ["time", "nodes", "moves", "restarts"]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Parameters
    ----------
    values : List[float]
        Numeric values to summarize.

    Returns
    -------
    StatsSummary
        count, mean, median, population std, min, max, q25, q75 and range.
        When ``values`` is empty every numeric field is ``None`` and ``count``
        is 0 to keep CSV/plot generation consistent.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    min_val = min(values)
    max_val = max(values)

    return {
        "count": n,
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if n > 1 else 0,
        "min": min_val,
        "max": max_val,
        "q25": sorted_vals[n // 4] if n >= 4 else min_val,
        "q75": sorted_vals[3 * n // 4] if n >= 4 else max_val,
        "range": max_val - min_val,
    }


def compute_grouped_statistics(results_list: List[RunRecord]) -> Dict[str, Any]:
    """Aggregate metrics by outcome groups (success, failure, timeout).

    A failure is a run that stopped without a solution and without timing out,
    i.e. an exhausted DFS.

    Returns
    -------
    Dict[str, Any]
        Rates (``success_rate``, ``timeout_rate``, ``failure_rate``), counters
        (``total_runs``, ``successes``, ``failures``, ``timeouts``) and
        ``<group>_<metric>`` summaries for every metric present, with group in
        ``all``, ``success``, ``timeout``, ``failure``.
    """
    successes = [r for r in results_list if r.get("success", False)]
    timeouts = [r for r in results_list if r.get("timeout", False)]
    failures = [r for r in results_list if not r.get("success", False) and not r.get("timeout", False)]
    total = len(results_list)

    stats: Dict[str, Any] = {
        "total_runs": total,
        "successes": len(successes),
        "failures": len(failures),
        "timeouts": len(timeouts),
        "success_rate": len(successes) / total if total else 0,
        "timeout_rate": len(timeouts) / total if total else 0,
        "failure_rate": len(failures) / total if total else 0,
    }

    groups = {"all": results_list, "success": successes, "timeout": timeouts, "failure": failures}
    for group, records in groups.items():
        for metric in METRICS:
            values = [r[metric] for r in records if metric in r]
            if values:
                stats[f"{group}_{metric}"] = compute_detailed_statistics(values)

    return stats

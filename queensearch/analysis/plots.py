"""Visualization utilities for benchmark outputs.

Charts are written as PNG files into ``out_dir``; filenames carry a two-digit
index for stable ordering plus the optional datestamp suffix from
``queensearch.analysis.settings``.

Chart map
---------
- 01_success_rate_vs_N.png: fraction of runs that found a solution, per
    algorithm. DFS is 0.0 for N = 2, 3 (exhausted) and on timeout.
- 02_time_vs_N_log_scale.png: mean wall-clock time of successful runs (log).
- 03_logical_cost_vs_N.png: DFS explored nodes and mean moves of the local
    searches (log), a hardware-independent effort proxy.
- 04_restarts_vs_N.png: mean hill-climbing restarts of successful runs.
"""
from __future__ import annotations

import os
from typing import Dict, List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from . import settings
from .stats import ExperimentResults

LABELS: Dict[str, str] = {
    "DFS": "Depth-first search",
    "HILL": "Hill climbing",
    "ANN": "Simulated annealing",
}
MARKERS: Dict[str, str] = {"DFS": "o", "HILL": "s", "ANN": "^"}


def _present(results: ExperimentResults, N_values: List[int]) -> List[str]:
    """Return the algorithms that have at least one entry among ``N_values``."""
    return [label for label in LABELS if any(N in results.get(label, {}) for N in N_values)]


def _series(results: ExperimentResults, label: str, N_values: List[int], key: str, metric: str = "") -> np.ndarray:
    """Extract one value per N; missing values become 0."""
    values = []
    for N in N_values:
        entry = results[label].get(N, {})
        if metric:
            value = entry.get(key, {}).get(metric)
        else:
            value = entry.get(key)
        values.append(float(value) if value is not None else 0.0)
    return np.asarray(values, dtype=float)


def _save(out_dir: str, name: str, description: str) -> str:
    fname = os.path.join(out_dir, f"{name}{settings.file_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved {description}: {fname}")
    return fname


def plot_and_save(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate the benchmark charts.

    Parameters
    ----------
    results : ExperimentResults
        Aggregated per-N summaries for DFS/HILL/ANN.
    N_values : List[int]
        Ordered list of N values to plot.
    out_dir : str
        Destination directory, created if missing.

    Returns
    -------
    List[str]
        Paths of the written images.
    """
    os.makedirs(out_dir, exist_ok=True)
    present = _present(results, N_values)
    written: List[str] = []
    if not present:
        print("Plotting skipped: no results to plot.")
        return written

    plt.figure(figsize=(10, 6))
    for label in present:
        rates = _series(results, label, N_values, "success_rate")
        plt.plot(N_values, rates, marker=MARKERS[label], linewidth=2, label=LABELS[label])
    plt.xlabel("N (board size)")
    plt.ylabel("Success rate")
    plt.title("Success Rate vs Problem Size")
    plt.ylim(-0.05, 1.05)
    plt.legend()
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    written.append(_save(out_dir, "01_success_rate_vs_N", "success-rate chart"))

    plt.figure(figsize=(10, 6))
    for label in present:
        times = np.maximum(_series(results, label, N_values, "success_time", "mean"), 1e-6)
        plt.semilogy(N_values, times, marker=MARKERS[label], linewidth=2, label=LABELS[label])
    plt.xlabel("N (board size)")
    plt.ylabel("Average time [s] (log scale)")
    plt.title("Execution Time vs Problem Size (successful runs only)")
    plt.legend()
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    written.append(_save(out_dir, "02_time_vs_N_log_scale", "execution-time chart"))

    plt.figure(figsize=(10, 6))
    for label in present:
        key = "success_nodes" if label == "DFS" else "success_moves"
        cost = np.maximum(_series(results, label, N_values, key, "mean"), 1)
        suffix = "explored nodes" if label == "DFS" else "moves"
        plt.semilogy(N_values, cost, marker=MARKERS[label], linewidth=2, label=f"{LABELS[label]}: {suffix}")
    plt.xlabel("N (board size)")
    plt.ylabel("Logical cost (log scale)")
    plt.title("Logical Cost vs Problem Size")
    plt.legend()
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    written.append(_save(out_dir, "03_logical_cost_vs_N", "logical-cost chart"))

    if "HILL" in present:
        restarts = _series(results, "HILL", N_values, "success_restarts", "mean")
        plt.figure(figsize=(10, 6))
        plt.bar([str(N) for N in N_values], restarts, color="#1f77b4", alpha=0.8)
        plt.xlabel("N (board size)")
        plt.ylabel("Average restarts")
        plt.title("Hill Climbing Restarts vs Problem Size (successful runs only)")
        plt.grid(True, axis="y", alpha=0.7)
        written.append(_save(out_dir, "04_restarts_vs_N", "restarts chart"))

    return written

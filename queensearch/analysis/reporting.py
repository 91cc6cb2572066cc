"""CSV export utilities for benchmark outputs (aggregates and raw runs).

These helpers materialize a compact per-N summary as well as full per-run raw
data for downstream analysis or spreadsheet inspection.
"""
from __future__ import annotations

import csv
import os
from typing import List, Optional

from . import settings
from .stats import ExperimentResults, StatsSummary


def _mean(summary: Optional[StatsSummary]):
    if not summary:
        return ""
    value = summary.get("mean")
    return "" if value is None else value


def save_results_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write per-N aggregate metrics for every algorithm to CSV.

    One row per (N, algorithm). Column names follow lowercase snake_case.

    Returns
    -------
    str
        Path of the written file.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results{settings.file_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "n",
            "algorithm",
            "total_runs",
            "successes",
            "timeouts",
            "failures",
            "success_rate",
            "mean_time_seconds",
            "mean_success_time_seconds",
            "mean_success_nodes",
            "mean_success_moves",
            "mean_success_restarts",
        ])
        for N in N_values:
            for label, per_n in results.items():
                entry = per_n.get(N)
                if not entry:
                    continue
                writer.writerow([
                    N,
                    label,
                    entry.get("total_runs", 0),
                    entry.get("successes", 0),
                    entry.get("timeouts", 0),
                    entry.get("failures", 0),
                    entry.get("success_rate", 0),
                    _mean(entry.get("all_time")),
                    _mean(entry.get("success_time")),
                    _mean(entry.get("success_nodes")),
                    _mean(entry.get("success_moves")),
                    _mean(entry.get("success_restarts")),
                ])

    print(f"Summary written to {filename}")
    return filename


def save_raw_data_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write one CSV row per individual solver run."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs{settings.file_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n", "algorithm", "run", "seed", "outcome", "time_seconds", "nodes", "moves", "restarts"])
        for N in N_values:
            for label, per_n in results.items():
                entry = per_n.get(N)
                if not entry:
                    continue
                for run_index, run in enumerate(entry.get("raw_runs", [])):
                    writer.writerow([
                        N,
                        label,
                        run_index,
                        run.get("seed", ""),
                        run.get("outcome", ""),
                        run.get("time", ""),
                        run.get("nodes", ""),
                        run.get("moves", ""),
                        run.get("restarts", ""),
                    ])

    print(f"Raw runs written to {filename}")
    return filename

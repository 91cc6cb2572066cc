"""
Orchestration and benchmark package for queensearch.

This package contains:
- settings: global knobs and time budgets
- stats: typed summaries and aggregation helpers
- experiments: benchmark runners for DFS/HILL/ANN with result shaping
- reporting: CSV exports of aggregates and raw runs
- plots: benchmark charts (imported on demand; pulls in matplotlib)
- cli: argument parser, single-solve dispatch and pipelines
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RunRecord,
    AlgorithmEntry,
    ExperimentResults,
    compute_detailed_statistics,
    compute_grouped_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "AlgorithmEntry",
    "ExperimentResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]

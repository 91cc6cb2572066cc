"""Global settings and time budgets for the queensearch CLI and benchmarks.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`queensearch.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from typing import List, Optional
from datetime import datetime

# Default budget for a single solve from the command line (whole seconds)
MAX_TIME: float = 60.0

# Default seed for hill climbing / annealing (None = derive from the clock)
SEED: Optional[int] = None

# Acceptance constant for worsening annealing moves
ANNEALING_ALPHA: float = 0.001

# Board sizes to evaluate (in ascending order) for scalability analysis
N_VALUES: List[int] = [4, 8, 12, 16, 20]

# Number of independent seeded runs per stochastic solver
RUNS_HILL: int = 10
RUNS_ANN: int = 10
RUNS_DFS: int = 1  # DFS is deterministic; one run per N is sufficient

# Seeds for run i are BASE_SEED + i
BASE_SEED: int = 42

# Per-algorithm budgets for benchmark runs, in seconds
DFS_TIME_LIMIT: float = 10.0
HILL_TIME_LIMIT: float = 10.0
ANN_TIME_LIMIT: float = 10.0

# Output directory for CSV and charts
OUT_DIR: str = "results_queensearch"

# When True, result files include a datestamp suffix (e.g., _20251113-142530)
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")


def set_timeouts(
        dfs_timeout: float = 10.0,
        hill_timeout: float = 10.0,
        ann_timeout: float = 10.0,
        verbose: bool = True,
) -> None:
        """Configure benchmark time budgets for all algorithms.

        Side effects
        - Updates module-level globals. When ``verbose`` is True, also prints a
            concise summary to stdout to make the active limits explicit.
        """
        global DFS_TIME_LIMIT, HILL_TIME_LIMIT, ANN_TIME_LIMIT
        DFS_TIME_LIMIT = float(dfs_timeout)
        HILL_TIME_LIMIT = float(hill_timeout)
        ANN_TIME_LIMIT = float(ann_timeout)

        if not verbose:
                return
        print("Timeout settings configured:")
        print(f"   - DFS: {DFS_TIME_LIMIT}s")
        print(f"   - Hill climbing: {HILL_TIME_LIMIT}s")
        print(f"   - Annealing: {ANN_TIME_LIMIT}s")


def file_suffix() -> str:
    """Return the datestamp suffix for output files, or '' when disabled."""
    return f"_{RUN_ID}" if DATE_IN_FILENAMES else ""

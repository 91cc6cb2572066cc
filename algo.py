"""
queensearch command-line entry point
====================================

Thin launcher around :mod:`queensearch.analysis.cli`:

    python algo.py --alg dfs -n 8 --maxtime 10
    python algo.py --alg hill -n 50 --maxtime 30 --seed 7
    python algo.py --alg ann -n 20 --maxtime 30 --seed 7
    python algo.py --benchmark
    python algo.py --quick-test
"""

from queensearch.analysis.cli import main, run_quick_regression_tests

__all__ = ["main", "run_quick_regression_tests"]


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Profile script for clear_arc to identify performance bottlenecks.
"""

import cProfile
import pstats
import io
import numpy as np
from numpy.typing import NDArray
import time
from clear_arc.api import find_largest_clear_arc


def generate_records(
    n_records: int,
    max_width: float = 0.01,
    wrap_fraction: float = 0.05
) -> NDArray[np.float64]:
    """
    Generate random records of short covering ranges.
    A share of them are wrap-around records (x1 > x2) straddling the 0/1 join.
    """
    starts = np.random.uniform(0.0, 1.0, n_records)
    widths = np.random.uniform(1e-6, max_width, n_records)
    ends = np.minimum(starts + widths, 1.0)
    records = np.column_stack([starts, ends])

    n_wrap = int(n_records * wrap_fraction)
    if n_wrap:
        records[:n_wrap, 0] = np.random.uniform(1.0 - max_width, 1.0, n_wrap)
        records[:n_wrap, 1] = np.random.uniform(1e-6, max_width, n_wrap)
    np.random.shuffle(records)
    return records


def run_sparse_workload(n_iterations: int = 100) -> None:
    """Few short ranges; the domain stays mostly clear."""
    np.random.seed(42)  # For reproducibility

    for _ in range(n_iterations):
        find_largest_clear_arc(generate_records(200))


def run_dense_workload(n_iterations: int = 5) -> None:
    """Many ranges; the tree grows large before trimming takes over."""
    np.random.seed(42)

    for _ in range(n_iterations):
        find_largest_clear_arc(generate_records(20000, max_width=0.0005))


def profile_function(func, description: str) -> None:
    """Profile a function and print statistics."""
    print(f"\n{'=' * 60}")
    print(f"Profiling: {description}")
    print('=' * 60)

    # Time the execution
    start = time.perf_counter()

    profiler = cProfile.Profile()
    profiler.enable()
    func()
    profiler.disable()

    elapsed = time.perf_counter() - start

    # Get stats
    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats('cumulative')
    ps.print_stats(30)
    print(s.getvalue())

    print(f"\nTotal time: {elapsed:.3f}s")


if __name__ == "__main__":
    print("Clear Arc Performance Profiling")
    print("=" * 60)

    profile_function(
        lambda: run_sparse_workload(100),
        "Sparse workload (200 records, 100 iterations)"
    )

    profile_function(
        lambda: run_dense_workload(5),
        "Dense workload (20000 records, 5 iterations)"
    )

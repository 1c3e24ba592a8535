"""Benchmark the iteration loop with and without step recording."""

import math
import time
from typing import Dict

from zconduit import Brent, NullTracks, Tracks, ZeroProblem, init


def benchmark_tracks(n_solves: int = 2000, recording: bool = False) -> Dict[str, float]:
    """Time repeated Brent solves of ``sin`` on ``(3, 4)``.

    Args:
        n_solves: Number of problems solved.
        recording: Use a recording :class:`Tracks` instead of :class:`NullTracks`.

    Returns:
        Dictionary with timing results.
    """
    problem = ZeroProblem(math.sin, (3.0, 4.0))

    # Warmup
    init(problem, Brent()).solve()

    steps = 0
    start = time.perf_counter()
    for _ in range(n_solves):
        tracks = Tracks() if recording else NullTracks()
        it = init(problem, Brent(), tracks=tracks)
        it.solve()
        steps += it.state.steps
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_solves": n_solves,
        "total_time_sec": total_time,
        "time_per_solve_sec": total_time / n_solves,
        "time_per_step_sec": total_time / max(steps, 1),
    }


if __name__ == "__main__":
    print("Benchmarking trackers...")

    for recording in (False, True):
        results = benchmark_tracks(recording=recording)
        name = "Tracks" if recording else "NullTracks"
        print(f"{name}:")
        print(f"  Time per solve: {results['time_per_solve_sec']*1e6:.2f} μs")
        print(f"  Time per step: {results['time_per_step_sec']*1e6:.2f} μs")

# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for profiling the advection hot path.

Provides micro-benchmarks (grid construction, single steps) and a
macro-benchmark (full single_run) with timing and optional cProfile output.
"""

import time
import cProfile
import pstats
import io
import numpy as np


def _run_params(Nx):
    return dict(Nx=Nx, velocity=1.0, cfl=0.8, t_final=1.0,
                bc="periodic", scheme="upwind", ic="bump", x0=0.5, width=0.2)


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_build_grid(Nx=256, n_iter=500):
    """Benchmark build_grid."""
    from advection1d.grid import build_grid
    return _time_fn(build_grid, args=(0.0, 1.0, Nx, 1), n_iter=n_iter)


def bench_step(Nx=256, n_iter=500, scheme="upwind"):
    """Benchmark one forward-Euler step with periodic boundaries."""
    from advection1d.simulation import AdvectionModel
    model = AdvectionModel(dict(_run_params(Nx), scheme=scheme))
    u = model.get_initial_condition()
    return _time_fn(model.integrator.step, args=(u, model.dt), n_iter=n_iter)


def bench_single_run(Nx=256):
    """Time a full single_run (macro benchmark)."""
    from advection1d.simulation import single_run
    t0 = time.perf_counter()
    result = single_run(_run_params(Nx))
    elapsed = time.perf_counter() - t0
    return {
        "elapsed_s": elapsed,
        "n_steps": result["n_steps"],
        "l1_error": result["l1_error"],
    }


def profile_single_run(Nx=256):
    """Run cProfile on single_run, return stats as string."""
    from advection1d.simulation import single_run
    pr = cProfile.Profile()
    pr.enable()
    single_run(_run_params(Nx))
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(30)
    return s.getvalue()


def run_all_benchmarks(Nx=256, verbose=True):
    """Run all micro and macro benchmarks. Returns dict of results."""
    results = {}

    benches = [
        ("build_grid", bench_build_grid),
        ("step", bench_step),
    ]

    for name, fn in benches:
        if verbose:
            print(f"  {name}...", end="", flush=True)
        r = fn(Nx=Nx)
        results[name] = r
        if verbose:
            print(f" {r['median_ms']:.3f} ms (median, n={r['n_iter']})")

    if verbose:
        print(f"  single_run (Nx={Nx})...", end="", flush=True)
    r = bench_single_run(Nx=Nx)
    results["single_run"] = r
    if verbose:
        print(f" {r['elapsed_s']:.2f} s")

    return results


if __name__ == "__main__":
    print("=" * 55)
    print("advection1d Benchmarks")
    print("=" * 55)
    print()

    print("cProfile of single_run (Nx=256):")
    print(profile_single_run())

    print("Micro-benchmarks (Nx=256):")
    run_all_benchmarks(Nx=256)

#!/usr/bin/env python3
# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Resolution x Courant-number study of first-order upwind advection.

Advects a profile once around the periodic unit interval for every
(Nx, C) pair and records the error against the exactly translated
profile, plus the observed convergence order at each Courant number.

Usage:
    python scripts/run_cfl_study.py [--Nx 50 100 200] [--cfl 1.0 0.9 0.5 0.1]

Examples:
    # Default study with a square pulse
    python scripts/run_cfl_study.py

    # Smooth bump, outflow boundaries, half a domain crossing
    python scripts/run_cfl_study.py --ic bump --bc outflow --t-final 0.5
"""

import argparse
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from advection1d.diagnostics import convergence_order
from advection1d.sweep import build_sweep_grid, run_sweep
from advection1d.sweep_utils import configure_logging, print_summary_table, save_sweep_results


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--Nx", nargs="+", type=int, default=[50, 100, 200, 400],
                        help="Interior cell counts")
    parser.add_argument("--cfl", nargs="+", type=float, default=[1.0, 0.9, 0.5, 0.1],
                        help="Courant numbers")
    parser.add_argument("--scheme", default="upwind",
                        choices=["upwind", "centered", "downwind"])
    parser.add_argument("--bc", default="periodic", choices=["periodic", "outflow"])
    parser.add_argument("--ic", default="square", choices=["square", "bump", "gaussian"])
    parser.add_argument("--velocity", type=float, default=1.0)
    parser.add_argument("--t-final", type=float, default=1.0)
    parser.add_argument("--outdir", default="results/cfl_study")
    args = parser.parse_args(argv)

    logger = configure_logging(args.outdir, "cfl_study")

    param_list = build_sweep_grid(
        args.Nx, args.cfl,
        velocity=args.velocity, t_final=args.t_final,
        scheme=args.scheme, bc=args.bc, ic=args.ic,
        x0=0.3, width=0.1,
    )
    results = run_sweep(param_list)

    rows = save_sweep_results(results, args.outdir)
    print_summary_table(rows)

    for cfl in args.cfl:
        subset = sorted((r for r in rows if abs(r["cfl"] - cfl) < 1e-9),
                        key=lambda r: r["Nx"])
        if len(subset) < 2:
            continue
        orders = convergence_order([r["l1_error"] for r in subset],
                                   [r["Nx"] for r in subset])
        logger.info("C=%.3f observed L1 orders: %s", cfl,
                    ", ".join(f"{p:.2f}" for p in orders))

    print(f"\nResults saved to {args.outdir}/")


if __name__ == "__main__":
    main()

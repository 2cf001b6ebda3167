# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/advection1d/sweep.py
import logging
from itertools import product

from advection1d.simulation import single_run

logger = logging.getLogger(__name__)


def build_sweep_grid(Nx_vals, cfl_vals, **base):
    """Build list of parameter dicts over (Nx, cfl), sharing `base` settings."""
    grid = []
    for Nx, cfl in product(Nx_vals, cfl_vals):
        params = dict(base)
        params.update(Nx=Nx, cfl=cfl)
        grid.append(params)
    return grid


def run_sweep(param_list):
    """Run each case in turn.

    Returns:
        list of result dicts, in the same order as param_list.
    """
    n = len(param_list)
    logger.info("Starting sweep: %d cases", n)

    results = []
    for i, params in enumerate(param_list):
        result = single_run(params)
        results.append(result)
        logger.debug(
            "Case %d/%d done: Nx=%s cfl=%s -> l1=%.3e",
            i + 1, n, params["Nx"], params.get("cfl"), result["l1_error"],
        )

    logger.info("Sweep complete: %d cases finished", n)
    return results

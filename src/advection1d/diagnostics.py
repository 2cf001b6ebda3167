# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np


def _interior(u, ng):
    u = np.asarray(u)
    return u[ng:len(u) - ng]


def total_mass(u, dx, ng=1):
    """Discrete integral dx * sum(u) over interior cells."""
    return float(dx * np.sum(_interior(u, ng)))


def error_norms(u, u_ref, dx, ng=1):
    """Grid-weighted L1, L2 and max-norm of u - u_ref over interior cells."""
    e = _interior(u, ng) - _interior(u_ref, ng)
    return {
        "l1": float(dx * np.sum(np.abs(e))),
        "l2": float(np.sqrt(dx * np.sum(e ** 2))),
        "linf": float(np.max(np.abs(e))),
    }


def exact_solution(x, t, velocity, xmin, xmax, ic_fn, **ic_kwargs):
    """Initial profile translated by velocity*t on the periodic domain [xmin, xmax).

    The characteristic foot x - a*t is wrapped back into the domain before
    the profile is sampled there.
    """
    L = xmax - xmin
    foot = xmin + np.mod(np.asarray(x) - velocity * t - xmin, L)
    return ic_fn(foot, **ic_kwargs)


def convergence_order(errors, resolutions):
    """Observed orders log(e_i/e_{i+1}) / log(N_{i+1}/N_i) between successive runs."""
    errors = np.asarray(errors, dtype=float)
    resolutions = np.asarray(resolutions, dtype=float)
    if len(errors) != len(resolutions):
        raise ValueError(
            f"errors and resolutions differ in length: {len(errors)} vs {len(resolutions)}"
        )
    return np.log(errors[:-1] / errors[1:]) / np.log(resolutions[1:] / resolutions[:-1])

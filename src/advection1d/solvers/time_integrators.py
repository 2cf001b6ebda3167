# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging
import math
from collections import namedtuple

from advection1d.errors import InvalidTimestepError
from advection1d.solvers.integrator import step

logger = logging.getLogger(__name__)

# Relative slack below which the remaining time is folded into the current
# step instead of leaving a round-off sized final step.
_T_EPS = 1e-12

EvolveResult = namedtuple("EvolveResult", ["t", "n_steps", "dts"])


def cfl_timestep(dx, a, cfl):
    """Step size for Courant number `cfl`: dt = cfl * dx / |a|."""
    if not cfl > 0:
        raise InvalidTimestepError(f"cfl must be positive, got {cfl}")
    if not 0 < abs(a) < math.inf:
        raise InvalidTimestepError(f"velocity must be finite and non-zero for a CFL timestep, got {a}")
    return cfl * dx / abs(a)


def evolve(u, t_final, dx, dt, a, dudt_fn, bc_left_fn, bc_right_fn, ng=1):
    """March `u` in place from t=0 to exactly t_final with forward Euler.

    Steps of size dt are taken until the next one would overshoot, and the
    last step is shrunk to land on t_final.

    Returns:
        EvolveResult(t, n_steps, dts) with t == t_final and the list of
        step sizes actually used.
    """
    if not dt > 0:
        raise InvalidTimestepError(f"dt must be positive, got {dt}")
    if not 0 <= t_final < math.inf:
        raise InvalidTimestepError(f"t_final must be finite and non-negative, got {t_final}")

    logger.debug("evolve: t_final=%g dt=%g a=%g dx=%g", t_final, dt, a, dx)

    t = 0.0
    dts = []
    slack = _T_EPS * max(abs(t_final), 1.0)
    while t < t_final:
        h = dt
        last = t + h >= t_final - slack
        if last:
            h = t_final - t
        step(u, dx, h, a, dudt_fn, bc_left_fn, bc_right_fn, ng=ng)
        dts.append(h)
        t = t_final if last else t + h

    logger.debug("evolve: reached t=%g in %d steps", t, len(dts))
    return EvolveResult(t, len(dts), dts)


class ForwardEuler:
    """Forward-Euler integrator with its stencil and boundaries bound up front.

    Args:
        dudt_fn: stencil, see advection1d.solvers.stencils.
        bc_left, bc_right: boundary operators, called as fn(u).
        dx: cell width.
        a: advection velocity.
        ng: ghost cells per side.
    """

    def __init__(self, dudt_fn, bc_left, bc_right, dx, a, ng=1):
        self.dudt_fn = dudt_fn
        self.bc_left = bc_left
        self.bc_right = bc_right
        self.dx = dx
        self.a = a
        self.ng = ng

    def step(self, u, dt):
        step(u, self.dx, dt, self.a, self.dudt_fn, self.bc_left, self.bc_right,
             ng=self.ng)

    def evolve(self, u, t_final, dt):
        return evolve(u, t_final, self.dx, dt, self.a, self.dudt_fn,
                      self.bc_left, self.bc_right, ng=self.ng)

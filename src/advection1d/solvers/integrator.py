# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np


def step(u, dx, dt, a, dudt_fn, bc_left_fn, bc_right_fn, ng=1):
    """Advance `u` by one forward-Euler step, in place.

    All interior derivatives are evaluated from the old state before any
    cell is updated; ghost zones are refreshed only after the interior
    update, left edge first.

    Args:
        u: state array including ng ghost cells per side. Mutated.
        dx: cell width.
        dt: step size.
        a: advection velocity.
        dudt_fn: stencil, dudt(u_left, u_center, u_right, a, dx), called
            once per interior cell with scalar neighbour values. numpy
            ufuncs (the compiled stencils) are applied to the whole
            interior in one call instead.
        bc_left_fn, bc_right_fn: boundary operators, called as fn(u).
        ng: ghost cells per side (>= 1).
    """
    n = len(u)
    if ng < 1 or n < 2 * ng + 1:
        raise IndexError(
            f"state array of length {n} has no interior for {ng} ghost cell(s) per side"
        )

    hi = n - ng
    dudt = np.empty(hi - ng)
    if isinstance(dudt_fn, np.ufunc):
        dudt[:] = dudt_fn(u[ng - 1:hi - 1], u[ng:hi], u[ng + 1:hi + 1], a, dx)
    else:
        for j, i in enumerate(range(ng, hi)):
            dudt[j] = dudt_fn(u[i - 1], u[i], u[i + 1], a, dx)

    u[ng:hi] += dt * dudt

    bc_left_fn(u)
    bc_right_fn(u)

# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Three-point spatial stencils for the advection right-hand side.

Every stencil has the signature

    dudt(u_left, u_center, u_right, a, dx) -> -a * du/dx (approx.)

and is compiled as a numba ufunc, so it accepts scalars or equally-shaped
arrays (one element per interior cell).
"""

from numba import vectorize

_SIG = ["float64(float64, float64, float64, float64, float64)"]


@vectorize(_SIG, cache=True)
def upwind_dudt(u_left, u_center, u_right, a, dx):
    """First-order upwind difference.

    Takes the one-sided difference on the side the flow comes from, which
    is the flux difference -(F_{i+1/2} - F_{i-1/2})/dx with F = a*u_upwind.
    Stable under forward Euler for 0 < |a|*dt/dx <= 1.
    """
    if a >= 0.0:
        return -a * (u_center - u_left) / dx
    return -a * (u_right - u_center) / dx


@vectorize(_SIG, cache=True)
def centered_dudt(u_left, u_center, u_right, a, dx):
    """Second-order centered difference. Unconditionally unstable with forward Euler."""
    return -a * (u_right - u_left) / (2.0 * dx)


@vectorize(_SIG, cache=True)
def downwind_dudt(u_left, u_center, u_right, a, dx):
    """One-sided difference against the flow. Unstable; for demonstration."""
    if a >= 0.0:
        return -a * (u_right - u_center) / dx
    return -a * (u_center - u_left) / dx


@vectorize(_SIG, cache=True)
def zero_dudt(u_left, u_center, u_right, a, dx):
    return 0.0


STENCILS = {
    "upwind": upwind_dudt,
    "centered": centered_dudt,
    "downwind": downwind_dudt,
    "zero": zero_dudt,
}


def get_stencil(name):
    """Look up a stencil by name."""
    try:
        return STENCILS[name]
    except KeyError:
        raise ValueError(f"Unknown scheme: {name!r}") from None

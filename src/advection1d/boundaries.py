# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Ghost-zone boundary operators.

Each operator rewrites the ghost cells on one side of a state array in
place and leaves interior cells untouched. Layer k (counted outward from
the interior) is filled from layer k-1 for copy/outflow conditions and
from the matching real cell on the opposite edge for periodic ones.

For ng=1 on an array of length N:
    periodic_left:  u[0]   = u[N-2]
    periodic_right: u[N-1] = u[1]
    copy_left:      u[0]   = u[1]
    copy_right:     u[N-1] = u[N-2]
"""

from functools import partial


def _check_length(u, ng):
    n = len(u)
    if n < 2 or n < 2 * ng:
        raise IndexError(
            f"state array of length {n} is too short for {ng} ghost cell(s) per side"
        )


def no_op(u, ng=1):
    """Leave the edge alone (externally managed)."""


def periodic_left(u, ng=1):
    _check_length(u, ng)
    n = len(u)
    for k in range(ng):
        i = ng - 1 - k
        u[i] = u[n - 2 * ng + i]


def periodic_right(u, ng=1):
    _check_length(u, ng)
    n = len(u)
    for k in range(ng):
        i = n - ng + k
        u[i] = u[i - n + 2 * ng]


def copy_left(u, ng=1):
    """Zero-gradient (outflow) condition on the left edge."""
    _check_length(u, ng)
    for k in range(ng):
        i = ng - 1 - k
        u[i] = u[i + 1]


def copy_right(u, ng=1):
    """Zero-gradient (outflow) condition on the right edge."""
    _check_length(u, ng)
    n = len(u)
    for k in range(ng):
        i = n - ng + k
        u[i] = u[i - 1]


BOUNDARIES = {
    "none": (no_op, no_op),
    "periodic": (periodic_left, periodic_right),
    "outflow": (copy_left, copy_right),
    "copy": (copy_left, copy_right),
}


def get_boundary(kind, side, ng=1):
    """Return the boundary operator for `kind` on `side`, bound to `ng`.

    Args:
        kind: one of "none", "periodic", "outflow" (alias "copy").
        side: "left" or "right".
        ng: ghost cells per side.
    """
    if kind not in BOUNDARIES:
        raise ValueError(f"Unknown boundary kind: {kind!r}")
    if side == "left":
        fn = BOUNDARIES[kind][0]
    elif side == "right":
        fn = BOUNDARIES[kind][1]
    else:
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")
    return partial(fn, ng=ng)


def apply_boundaries(u, kind, ng=1):
    """Fill both ghost zones of `u` with the `kind` condition."""
    get_boundary(kind, "left", ng)(u)
    get_boundary(kind, "right", ng)(u)

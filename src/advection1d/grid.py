# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np

from advection1d.errors import InvalidDomainError


def _validate(a, b, Nx, Ng):
    if Nx <= 0:
        raise InvalidDomainError(f"Nx must be >= 1, got {Nx}")
    if Ng < 0:
        raise InvalidDomainError(f"Ng must be non-negative, got {Ng}")
    if not a < b:
        raise InvalidDomainError(f"domain bounds must satisfy a < b, got a={a}, b={b}")


def build_grid(a, b, Nx, Ng):
    """Cell-centered uniform grid on [a, b] with Ng ghost cells per side.

    Returns:
        (dx, x, xe): cell width, cell centers (Nx + 2*Ng) and
        cell faces (Nx + 2*Ng + 1).
    """
    _validate(a, b, Nx, Ng)

    dx = (b - a) / Nx
    xe = np.linspace(a - Ng * dx, b + Ng * dx, Nx + 2 * Ng + 1)
    x = 0.5 * (xe[:-1] + xe[1:])
    return dx, x, xe


class UniformGrid:
    """1D uniform cell-centered grid with ghost zones.

    Interior (physical) cells are x[Ng:Ng+Nx]; the Ng cells on each side
    hold boundary-condition values.

    Attributes:
        a, b: domain bounds
        Nx: number of interior cells
        Ng: number of ghost cells per side
        dx: cell width
        x: cell centers, shape (Nx + 2*Ng,), read-only
        xe: cell faces, shape (Nx + 2*Ng + 1,), read-only
    """

    def __init__(self, a, b, Nx, Ng=1):
        self.dx, x, xe = build_grid(a, b, Nx, Ng)

        self.a = a
        self.b = b
        self.Nx = Nx
        self.Ng = Ng

        x.flags.writeable = False
        xe.flags.writeable = False
        self.x = x
        self.xe = xe

    @property
    def interior(self):
        """Slice selecting the physical cells of an array on this grid."""
        return slice(self.Ng, self.Ng + self.Nx)

    @property
    def n_cells(self):
        return self.Nx + 2 * self.Ng

    def zeros(self):
        """A fresh, writable state array sized for this grid."""
        return np.zeros(self.n_cells)

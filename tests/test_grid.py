# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from advection1d.grid import UniformGrid, build_grid


@pytest.mark.parametrize("a, b, Nx, Ng", [
    (0.0, 1.0, 100, 1),
    (-2.0, 3.0, 7, 0),
    (0.5, 0.75, 1, 3),
])
def test_grid_sizes_and_midpoints(a, b, Nx, Ng):
    """Centers are face midpoints; array lengths include the ghost zones."""
    dx, x, xe = build_grid(a, b, Nx, Ng)
    assert len(x) == Nx + 2 * Ng
    assert len(xe) == Nx + 2 * Ng + 1
    for i in range(len(x)):
        assert x[i] == 0.5 * (xe[i] + xe[i + 1])


def test_uniform_spacing():
    dx, x, xe = build_grid(0.0, 1.0, 64, 2)
    assert np.isclose(dx, 1.0 / 64)
    assert np.allclose(np.diff(xe), dx)
    assert np.allclose(np.diff(x), dx)


def test_faces_span_ghost_extended_domain():
    dx, x, xe = build_grid(0.0, 1.0, 10, 2)
    assert np.isclose(xe[0], -2 * dx)
    assert np.isclose(xe[-1], 1.0 + 2 * dx)
    # physical domain starts at face Ng
    assert np.isclose(xe[2], 0.0)
    assert np.isclose(xe[-3], 1.0)


def test_uniform_grid_interior_and_readonly():
    g = UniformGrid(0.0, 1.0, 10, Ng=2)
    assert g.n_cells == 14
    assert np.isclose(g.x[g.interior][0], 0.05)
    assert np.isclose(g.x[g.interior][-1], 0.95)
    with pytest.raises(ValueError):
        g.x[0] = 1.0
    u = g.zeros()
    u[0] = 1.0
    assert u.shape == g.x.shape

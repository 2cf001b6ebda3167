# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from advection1d.boundaries import (
    apply_boundaries, copy_left, copy_right, get_boundary, no_op,
    periodic_left, periodic_right,
)


def test_periodic_single_layer():
    u = np.array([-1.0, 1.0, 2.0, 3.0, -1.0])
    periodic_left(u)
    periodic_right(u)
    assert len(u) == 5
    assert u[0] == u[3]
    assert u[4] == u[1]
    assert np.array_equal(u[1:4], [1.0, 2.0, 3.0])


def test_copy_single_layer():
    u = np.array([9.0, 1.0, 2.0, 3.0, 9.0])
    copy_left(u)
    copy_right(u)
    assert u[0] == u[1]
    assert u[-1] == u[-2]
    assert np.array_equal(u[1:4], [1.0, 2.0, 3.0])


def test_each_operator_touches_only_its_ghost():
    base = np.arange(6, dtype=float)
    for fn, idx in [(periodic_left, 0), (copy_left, 0),
                    (periodic_right, 5), (copy_right, 5)]:
        u = base.copy()
        u[idx] = -7.0
        fn(u)
        mask = np.ones(6, dtype=bool)
        mask[idx] = False
        assert np.array_equal(u[mask], base[mask]), fn.__name__


def test_no_op_leaves_array_alone():
    u = np.array([5.0, 1.0, 2.0, 6.0])
    no_op(u)
    assert np.array_equal(u, [5.0, 1.0, 2.0, 6.0])


def test_periodic_multi_layer():
    ng = 3
    u = np.zeros(10 + 2 * ng)
    u[ng:-ng] = np.arange(1.0, 11.0)
    periodic_left(u, ng=ng)
    periodic_right(u, ng=ng)
    assert np.array_equal(u[:ng], u[-2 * ng:-ng])
    assert np.array_equal(u[-ng:], u[ng:2 * ng])
    assert np.array_equal(u[:ng], [8.0, 9.0, 10.0])
    assert np.array_equal(u[-ng:], [1.0, 2.0, 3.0])


def test_copy_multi_layer():
    ng = 2
    u = np.array([0.0, 0.0, 4.0, 5.0, 6.0, 0.0, 0.0])
    copy_left(u, ng=ng)
    copy_right(u, ng=ng)
    assert np.array_equal(u, [4.0, 4.0, 4.0, 5.0, 6.0, 6.0, 6.0])


@pytest.mark.parametrize("fn", [periodic_left, periodic_right, copy_left, copy_right])
def test_short_array_raises_index_error(fn):
    with pytest.raises(IndexError):
        fn(np.zeros(1))
    with pytest.raises(IndexError):
        fn(np.zeros(3), ng=2)


def test_get_boundary_binds_ghost_count():
    left = get_boundary("outflow", "left", ng=2)
    u = np.array([0.0, 0.0, 3.0, 4.0, 0.0, 0.0])
    left(u)
    assert np.array_equal(u[:3], [3.0, 3.0, 3.0])
    assert u[-1] == 0.0


def test_get_boundary_rejects_unknown():
    with pytest.raises(ValueError):
        get_boundary("reflecting", "left")
    with pytest.raises(ValueError):
        get_boundary("periodic", "top")


def test_apply_boundaries_periodic():
    u = np.array([0.0, 1.0, 2.0, 3.0, 0.0])
    apply_boundaries(u, "periodic")
    assert np.array_equal(u, [3.0, 1.0, 2.0, 3.0, 1.0])

# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from advection1d.initial_conditions import bump, gaussian, get_initial_condition, square_pulse


def test_square_pulse():
    x = np.array([0.15, 0.25, 0.3, 0.35, 0.45])
    u = square_pulse(x, 0.3, 0.1, amp=2.0)
    assert np.array_equal(u, [0.0, 2.0, 2.0, 2.0, 0.0])


def test_bump_shape():
    x = np.array([0.0, 0.25, 0.5, 0.75, 1.0, 2.0])
    u = bump(x, 0.5, 0.5, amp=3.0)
    assert np.isclose(u[2], 3.0)
    assert np.isclose(u[1], 1.5)
    assert np.isclose(u[3], 1.5)
    assert u[0] == 0.0 and u[4] == 0.0 and u[5] == 0.0


def test_gaussian_peak():
    x = np.linspace(-1, 1, 201)
    u = gaussian(x, 0.0, 0.2)
    assert np.isclose(u.max(), 1.0)
    assert np.isclose(u[100 + 20], np.exp(-1.0))


def test_registry():
    assert get_initial_condition("square") is square_pulse
    with pytest.raises(ValueError):
        get_initial_condition("sawtooth")

# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Initial profiles sampled at cell centers."""

import numpy as np


def bump(x, x0, width, amp=1.0):
    """amp * cos^2(pi/2 * (x - x0)/width) inside |x - x0| < width, else 0."""
    x = np.asarray(x, dtype=float)
    s = (x - x0) / width
    return np.where(np.abs(s) < 1.0, amp * np.cos(0.5 * np.pi * s) ** 2, 0.0)


def square_pulse(x, x0, width, amp=1.0):
    """amp inside |x - x0| < width, else 0."""
    x = np.asarray(x, dtype=float)
    return np.where(np.abs(x - x0) < width, float(amp), 0.0)


def gaussian(x, x0, width, amp=1.0):
    x = np.asarray(x, dtype=float)
    return amp * np.exp(-((x - x0) / width) ** 2)


INITIAL_CONDITIONS = {
    "bump": bump,
    "square": square_pulse,
    "gaussian": gaussian,
}


def get_initial_condition(name):
    try:
        return INITIAL_CONDITIONS[name]
    except KeyError:
        raise ValueError(f"Unknown initial condition: {name!r}") from None

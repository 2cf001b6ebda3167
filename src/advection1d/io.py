# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""JSON persistence for single_run results."""

import json
from pathlib import Path

import numpy as np

# Fields of a run result stored as solution arrays on the grid.
ARRAY_FIELDS = ("x", "u_initial", "u_final")


class _RunEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        # numpy scalars (float64 errors, int64 step counts, bool_ flags)
        if isinstance(obj, np.generic):
            return obj.item()
        return super().default(obj)


def save_run(result, path):
    """Write a run result as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        json.dump(result, f, cls=_RunEncoder, indent=2)


def load_run(path, as_arrays=True):
    """Load a saved run; solution fields come back as float arrays."""
    with Path(path).open() as f:
        result = json.load(f)
    if as_arrays:
        for key in ARRAY_FIELDS:
            if key in result:
                result[key] = np.asarray(result[key], dtype=float)
    return result

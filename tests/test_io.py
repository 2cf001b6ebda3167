# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from advection1d.io import save_run, load_run
from advection1d.simulation import single_run


def test_save_and_load_run(tmp_path):
    result = single_run(dict(Nx=20, t_final=0.25, ic="bump", x0=0.5, width=0.2))
    path = tmp_path / "run_001.json"
    save_run(result, str(path))
    loaded = load_run(str(path))

    assert loaded["params"]["Nx"] == 20
    assert loaded["n_steps"] == result["n_steps"]
    assert loaded["t_final"] == 0.25
    assert isinstance(loaded["u_final"], np.ndarray)
    assert np.allclose(loaded["u_final"], result["u_final"])
    assert np.allclose(loaded["x"], result["x"])


def test_load_raw_lists(tmp_path):
    path = tmp_path / "raw.json"
    save_run({"x": np.arange(3.0), "n": np.int64(3), "v": np.float32(0.5)}, str(path))
    loaded = load_run(str(path), as_arrays=False)
    assert loaded == {"x": [0.0, 1.0, 2.0], "n": 3, "v": 0.5}


def test_save_creates_parent_dirs_and_numpy_scalars(tmp_path):
    path = tmp_path / "nested" / "deeper" / "run.json"
    save_run({"converged": np.bool_(True), "courant": np.float64(0.8)}, path)
    loaded = load_run(path)
    assert loaded == {"converged": True, "courant": 0.8}

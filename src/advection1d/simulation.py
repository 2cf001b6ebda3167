# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging

import numpy as np

from advection1d.boundaries import apply_boundaries, get_boundary
from advection1d.diagnostics import error_norms, exact_solution, total_mass
from advection1d.errors import InvalidDomainError
from advection1d.grid import UniformGrid
from advection1d.initial_conditions import get_initial_condition
from advection1d.solvers.stencils import get_stencil
from advection1d.solvers.time_integrators import ForwardEuler, cfl_timestep

logger = logging.getLogger(__name__)


class AdvectionModel:
    """Linear advection u_t + a u_x = 0 on [xmin, xmax], configured from a dict.

    Required params: Nx.
    Optional params (defaults): xmin (0.0), xmax (1.0), Ng (1),
    velocity (1.0), cfl (0.5), dt (derived from cfl), t_final (1.0),
    bc ("periodic"), scheme ("upwind"), ic ("square"), x0 (0.3),
    width (0.1), amp (1.0).

    Time integration: forward Euler with a three-point stencil; ghost
    zones are refreshed after every step.
    """

    def __init__(self, params):
        if params.get("Ng", 1) < 1:
            raise InvalidDomainError(f"Ng must be >= 1 (three-point stencil), got {params.get('Ng')}")

        self.params = params
        self.velocity = params.get("velocity", 1.0)
        self.t_final = params.get("t_final", 1.0)
        self.bc = params.get("bc", "periodic")
        self.scheme = params.get("scheme", "upwind")
        self.ic = params.get("ic", "square")
        self.ic_kwargs = dict(
            x0=params.get("x0", 0.3),
            width=params.get("width", 0.1),
            amp=params.get("amp", 1.0),
        )

        self.grid = UniformGrid(
            params.get("xmin", 0.0), params.get("xmax", 1.0),
            params["Nx"], params.get("Ng", 1),
        )

        if "dt" in params:
            self.dt = params["dt"]
        else:
            self.dt = cfl_timestep(self.grid.dx, self.velocity, params.get("cfl", 0.5))

        self.ic_fn = get_initial_condition(self.ic)
        ng = self.grid.Ng
        self.integrator = ForwardEuler(
            get_stencil(self.scheme),
            get_boundary(self.bc, "left", ng),
            get_boundary(self.bc, "right", ng),
            self.grid.dx, self.velocity, ng=ng,
        )

    @property
    def courant(self):
        return abs(self.velocity) * self.dt / self.grid.dx

    def get_initial_condition(self):
        """Initial profile at cell centers with ghost zones filled."""
        u = self.ic_fn(self.grid.x, **self.ic_kwargs)
        apply_boundaries(u, self.bc, self.grid.Ng)
        return u

    def exact(self, t):
        """Initial profile carried a distance velocity*t."""
        g = self.grid
        if self.bc == "periodic":
            return exact_solution(g.x, t, self.velocity, g.a, g.b,
                                  self.ic_fn, **self.ic_kwargs)
        return self.ic_fn(g.x - self.velocity * t, **self.ic_kwargs)

    def run(self, u):
        """Advance `u` in place to t_final."""
        return self.integrator.evolve(u, self.t_final, self.dt)


def single_run(params):
    """Run one advection case to t_final.

    Args:
        params: dict accepted by AdvectionModel.

    Returns:
        dict with params, grid/solution arrays, step info, mass and
        error diagnostics.
    """
    model = AdvectionModel(params)
    g = model.grid
    u = model.get_initial_condition()
    u0 = u.copy()

    mass0 = total_mass(u, g.dx, g.Ng)
    res = model.run(u)
    errors = error_norms(u, model.exact(res.t), g.dx, g.Ng)

    logger.debug(
        "Nx=%d C=%.3f scheme=%s bc=%s: %d steps, l1=%.3e",
        g.Nx, model.courant, model.scheme, model.bc, res.n_steps, errors["l1"],
    )

    return {
        "params": dict(params),
        "x": np.array(g.x),
        "u_initial": u0,
        "u_final": u,
        "t_final": res.t,
        "n_steps": res.n_steps,
        "dt": model.dt,
        "courant": model.courant,
        "mass_initial": mass0,
        "mass_final": total_mass(u, g.dx, g.Ng),
        "l1_error": errors["l1"],
        "l2_error": errors["l2"],
        "linf_error": errors["linf"],
    }

"""Fixed-iteration solver for Kepler's equation."""
from __future__ import annotations

import numpy as np

from .config import ENGINE_CFG


def solve_kepler(mean_anomaly, e, iterations: int = ENGINE_CFG.kepler_iterations):
    """Return the eccentric anomaly ``E`` solving ``E = M + e sin E``.

    Plain fixed-point iteration seeded at ``E = M`` for a constant number of
    steps. The error shrinks roughly like ``e**iterations`` so six steps are
    good to ~1e-4 rad for Mercury (e ~ 0.21) and far better for the other
    planets. Higher eccentricities are not refined further.

    Works elementwise on numpy arrays as well as on plain floats.
    """

    E = mean_anomaly
    for _ in range(iterations):
        E = mean_anomaly + e * np.sin(E)
    return E


__all__ = ["solve_kepler"]

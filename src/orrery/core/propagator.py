"""Heliocentric positions from Keplerian elements."""
from __future__ import annotations

import math

import numpy as np

from .config import ENGINE_CFG, EngineCfg
from .elements import OrbitalElements
from .kepler import solve_kepler


def orbital_plane(a, e, E):
    """Coordinates in the orbital plane with the focus at the origin.

    ``max(0, 1 - e**2)`` keeps rate-extrapolated eccentricities above one from
    producing NaN at extreme epochs.
    """

    x_p = a * (np.cos(E) - e)
    y_p = a * (math.sqrt(max(0.0, 1.0 - e * e)) * np.sin(E))
    return x_p, y_p


def rotate_to_ecliptic(x_p, y_p, w: float, i: float, node: float):
    """Rotate orbital-plane coordinates by ``w``, ``i`` and ``node`` (radians)."""

    cw, sw = math.cos(w), math.sin(w)
    ci, si = math.cos(i), math.sin(i)
    cn, sn = math.cos(node), math.sin(node)
    x = (cw * cn - sw * sn * ci) * x_p + (-sw * cn - cw * sn * ci) * y_p
    y = (cw * sn + sw * cn * ci) * x_p + (-sw * sn + cw * cn * ci) * y_p
    z = (sw * si) * x_p + (cw * si) * y_p
    return x, y, z


def orientation(elements: OrbitalElements) -> tuple[float, float, float]:
    """Return ``(w, i, node)`` in radians for instantaneous elements."""

    lp = math.radians(elements.longPeri)
    node = math.radians(elements.longNode)
    return lp - node, math.radians(elements.i), node


def mean_anomaly(elements: OrbitalElements) -> float:
    return math.radians(elements.L) - math.radians(elements.longPeri)


def heliocentric_position(
    elements: OrbitalElements, cfg: EngineCfg = ENGINE_CFG
) -> np.ndarray:
    """Ecliptic Cartesian position (AU) for instantaneous elements."""

    E = solve_kepler(mean_anomaly(elements), elements.e, cfg.kepler_iterations)
    x_p, y_p = orbital_plane(elements.a, elements.e, E)
    w, i, node = orientation(elements)
    return np.array(rotate_to_ecliptic(x_p, y_p, w, i, node), dtype=float)


def propagate(
    elements: OrbitalElements, days: float, cfg: EngineCfg = ENGINE_CFG
) -> np.ndarray:
    """Position ``days`` after J2000 using the secular-rate element model."""

    return heliocentric_position(elements.at_epoch(days, cfg), cfg)


__all__ = [
    "heliocentric_position",
    "mean_anomaly",
    "orbital_plane",
    "orientation",
    "propagate",
    "rotate_to_ecliptic",
]

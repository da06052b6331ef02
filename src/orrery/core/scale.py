"""Mapping from true heliocentric distance to display distance."""
from __future__ import annotations

from enum import Enum

import numpy as np

from .config import ENGINE_CFG, EngineCfg


class ScaleMode(Enum):
    REAL = "real"
    VISUAL = "visual"

    @property
    def label(self) -> str:
        return "Real" if self is ScaleMode.REAL else "Visual"

    def toggled(self) -> "ScaleMode":
        return ScaleMode.VISUAL if self is ScaleMode.REAL else ScaleMode.REAL


def display_radius(r, mode: ScaleMode, cfg: EngineCfg = ENGINE_CFG):
    """Display radius for a true radius ``r`` in AU.

    ``REAL`` is linear. ``VISUAL`` compresses with a power law so the inner
    and outer planets fit on screen together. Both are strictly increasing
    for ``r >= 0``.
    """

    if mode is ScaleMode.REAL:
        return r * cfg.real_scale_factor
    return cfg.visual_offset + np.power(r, cfg.visual_exponent) * cfg.visual_multiplier


def to_display(position: np.ndarray, mode: ScaleMode, cfg: EngineCfg = ENGINE_CFG) -> np.ndarray:
    """Scale the radial magnitude of ``position`` and keep its direction.

    A body exactly at the origin has no direction and stays at the origin.
    """

    r = float(np.linalg.norm(position))
    if r <= 0.0:
        return np.zeros(3, dtype=float)
    return position * (display_radius(r, mode, cfg) / r)


def to_display_many(points: np.ndarray, mode: ScaleMode, cfg: EngineCfg = ENGINE_CFG) -> np.ndarray:
    """Vectorised :func:`to_display` for an ``(n, 3)`` array."""

    r = np.linalg.norm(points, axis=1)
    factor = np.zeros_like(r)
    nonzero = r > 0.0
    factor[nonzero] = display_radius(r[nonzero], mode, cfg) / r[nonzero]
    return points * factor[:, np.newaxis]


__all__ = ["ScaleMode", "display_radius", "to_display", "to_display_many"]

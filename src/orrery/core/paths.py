"""Display-space orbit polylines."""
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .config import ENGINE_CFG, EngineCfg
from .elements import OrbitalElements
from .kepler import solve_kepler
from .propagator import orbital_plane, orientation, rotate_to_ecliptic
from .scale import ScaleMode, to_display_many

logger = logging.getLogger(__name__)


def sample_orbit_path(
    elements: OrbitalElements,
    mode: ScaleMode,
    cfg: EngineCfg = ENGINE_CFG,
) -> np.ndarray:
    """Return a closed ``(path_samples, 3)`` polyline for instantaneous elements.

    Sample angles are spaced evenly over a full turn with the end point
    repeated, so the first and last rows coincide. Each angle seeds a short
    Kepler refinement before going through the same rotation and scaling as a
    propagated position.
    """

    angles = np.linspace(0.0, 2.0 * np.pi, cfg.path_samples)
    # Pin the closing sample to the first one.
    angles[-1] = angles[0]
    E = solve_kepler(angles, elements.e, cfg.path_iterations)
    x_p, y_p = orbital_plane(elements.a, elements.e, E)
    w, i, node = orientation(elements)
    x, y, z = rotate_to_ecliptic(x_p, y_p, w, i, node)
    return to_display_many(np.column_stack((x, y, z)), mode, cfg)


class OrbitPathCache:
    """Orbit polylines for a set of bodies, rebuilt on scale-mode changes.

    The ellipse shape is taken from the elements at the epoch of the last
    rebuild. Secular drift between rebuilds is not tracked.
    """

    def __init__(self, cfg: EngineCfg = ENGINE_CFG) -> None:
        self._cfg = cfg
        self._mode: ScaleMode | None = None
        self._paths: dict[str, np.ndarray] = {}

    @property
    def mode(self) -> ScaleMode | None:
        return self._mode

    @property
    def paths(self) -> dict[str, np.ndarray]:
        return self._paths

    def needs_rebuild(self, mode: ScaleMode) -> bool:
        return self._mode is not mode

    def update(
        self,
        mode: ScaleMode,
        elements: Iterable[tuple[str, OrbitalElements]],
    ) -> bool:
        """Rebuild every path if ``mode`` differs from the cached mode.

        ``elements`` yields ``(body_id, instantaneous elements)`` pairs and is
        only consumed on a rebuild. Returns ``True`` when paths were rebuilt.
        """

        if not self.needs_rebuild(mode):
            return False
        self._paths = {
            body_id: sample_orbit_path(current, mode, self._cfg)
            for body_id, current in elements
        }
        logger.debug("Rebuilt %d orbit paths for %s scale", len(self._paths), mode.label)
        self._mode = mode
        return True

    def clear(self) -> None:
        self._mode = None
        self._paths = {}


__all__ = ["OrbitPathCache", "sample_orbit_path"]

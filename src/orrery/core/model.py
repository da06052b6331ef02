"""Bodies, propagated state and the per-tick system evaluation."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from .config import ENGINE_CFG, EngineCfg
from .elements import OrbitalElements, centuries_since_j2000
from .paths import OrbitPathCache
from .propagator import heliocentric_position
from .scale import ScaleMode, display_radius, to_display
from .timekeeping import SimulationClock

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class CelestialBody:
    """A planet and its static reference data.

    ``radius`` is in render units, not a physical size. ``rotation_speed`` is
    in rotations per simulated day.
    """

    id: str
    name: str
    elements: OrbitalElements
    radius: float
    rotation_speed: float
    orbital_period: float
    color: str = "#FFFFFF"
    atmosphere_color: str | None = None
    has_rings: bool = False
    description: str = ""
    facts: dict[str, str] = field(default_factory=dict, compare=False)

    def rotation_phase(self, days: float) -> float:
        """Spin angle in radians at ``days``.

        ``rotation_speed`` counts whole turns per simulated day, so a body with
        speed 1.0 shows the same face at every integer day. Calendar jumps of
        365.25 or 30.44 days still move it by a quarter or 0.44 of a turn.
        """

        return (TWO_PI * self.rotation_speed * days) % TWO_PI


@dataclass(frozen=True)
class PropagatedState:
    body_id: str
    position: np.ndarray
    display_position: np.ndarray
    radius: float
    display_radius: float
    rotation_phase: float


@dataclass(frozen=True)
class Frame:
    """Everything a host needs to draw one tick."""

    days: float
    scale_mode: ScaleMode
    states: dict[str, PropagatedState]
    paths: dict[str, np.ndarray]
    paths_changed: bool


class Orrery:
    """Evaluates every body at a shared epoch.

    Positions are recomputed on each call. Orbit paths come from an
    :class:`OrbitPathCache` and only change when the scale mode does.
    """

    def __init__(
        self,
        bodies: Iterable[CelestialBody],
        *,
        scale_mode: ScaleMode = ScaleMode.VISUAL,
        cfg: EngineCfg = ENGINE_CFG,
    ) -> None:
        self._bodies: tuple[CelestialBody, ...] = tuple(bodies)
        self._by_id = {body.id: body for body in self._bodies}
        if len(self._by_id) != len(self._bodies):
            raise ValueError("Body ids must be unique")
        self._cfg = cfg
        self._scale_mode = scale_mode
        self._selected_id: str | None = None
        self._paths = OrbitPathCache(cfg)

    @property
    def bodies(self) -> Sequence[CelestialBody]:
        return self._bodies

    def body(self, body_id: str) -> CelestialBody:
        try:
            return self._by_id[body_id]
        except KeyError:
            raise KeyError(f"Unknown body: {body_id!r}") from None

    @property
    def scale_mode(self) -> ScaleMode:
        return self._scale_mode

    @scale_mode.setter
    def scale_mode(self, mode: ScaleMode) -> None:
        if mode is not self._scale_mode:
            logger.info("Scale mode -> %s", mode.label)
        self._scale_mode = mode

    def toggle_scale(self) -> ScaleMode:
        self.scale_mode = self._scale_mode.toggled()
        return self._scale_mode

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected(self) -> CelestialBody | None:
        if self._selected_id is None:
            return None
        return self._by_id[self._selected_id]

    def select(self, body_id: str | None) -> CelestialBody | None:
        """Set the emphasised body. Selection never affects propagation."""

        if body_id is None:
            self._selected_id = None
            return None
        body = self.body(body_id)
        self._selected_id = body.id
        logger.debug("Tracking %s", body.name)
        return body

    def select_index(self, index: int) -> CelestialBody | None:
        """Select by zero-based display order; out-of-range indices are ignored."""

        if 0 <= index < len(self._bodies):
            return self.select(self._bodies[index].id)
        return None

    def evaluate_body(self, body: CelestialBody, days: float, T: float | None = None) -> PropagatedState:
        if T is None:
            T = centuries_since_j2000(days, self._cfg)
        position = heliocentric_position(body.elements.at(T), self._cfg)
        r = float(np.linalg.norm(position))
        # A body on the Sun has no displacement in either scale.
        shown_r = float(display_radius(r, self._scale_mode, self._cfg)) if r > 0.0 else 0.0
        return PropagatedState(
            body_id=body.id,
            position=position,
            display_position=to_display(position, self._scale_mode, self._cfg),
            radius=r,
            display_radius=shown_r,
            rotation_phase=body.rotation_phase(days),
        )

    def evaluate(self, days: float) -> dict[str, PropagatedState]:
        T = centuries_since_j2000(days, self._cfg)
        return {body.id: self.evaluate_body(body, days, T) for body in self._bodies}

    def orbit_paths(self, days: float) -> tuple[dict[str, np.ndarray], bool]:
        """Current polylines and whether they were rebuilt for this call."""

        T = centuries_since_j2000(days, self._cfg)
        changed = self._paths.update(
            self._scale_mode,
            ((body.id, body.elements.at(T)) for body in self._bodies),
        )
        return self._paths.paths, changed

    def step(self, clock: SimulationClock, dt_seconds: float) -> Frame:
        """Advance ``clock`` and evaluate all bodies at its new epoch."""

        days = clock.tick(dt_seconds)
        paths, changed = self.orbit_paths(days)
        return Frame(
            days=days,
            scale_mode=self._scale_mode,
            states=self.evaluate(days),
            paths=paths,
            paths_changed=changed,
        )


__all__ = ["CelestialBody", "Frame", "Orrery", "PropagatedState"]

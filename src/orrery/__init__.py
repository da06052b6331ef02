"""Keplerian solar system orrery: orbit propagation, display scaling and hosts."""

from orrery.core.elements import OrbitalElements
from orrery.core.model import CelestialBody, Frame, Orrery, PropagatedState
from orrery.core.scale import ScaleMode
from orrery.core.timekeeping import SimulationClock

__version__ = "1.0.0"

__all__ = [
    "CelestialBody",
    "Frame",
    "OrbitalElements",
    "Orrery",
    "PropagatedState",
    "ScaleMode",
    "SimulationClock",
]

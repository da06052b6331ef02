"""Keplerian mean elements with linear secular rates."""
from __future__ import annotations

from dataclasses import dataclass

from .config import ENGINE_CFG, EngineCfg


def centuries_since_j2000(days: float, cfg: EngineCfg = ENGINE_CFG) -> float:
    """Convert a day offset from J2000 into Julian centuries."""

    return days / cfg.days_per_century


@dataclass(frozen=True)
class OrbitalElements:
    """Mean orbital elements at J2000.

    Distances are in AU and angles in degrees. Every ``*_rate`` is the change
    per Julian century.
    """

    a: float
    e: float
    i: float
    L: float
    longPeri: float
    longNode: float
    a_rate: float = 0.0
    e_rate: float = 0.0
    i_rate: float = 0.0
    L_rate: float = 0.0
    longPeri_rate: float = 0.0
    longNode_rate: float = 0.0

    def at(self, T: float) -> "OrbitalElements":
        """Return the instantaneous elements ``T`` centuries from J2000.

        The returned record has zero rates; its angles are still in degrees.
        """

        return OrbitalElements(
            a=self.a + self.a_rate * T,
            e=self.e + self.e_rate * T,
            i=self.i + self.i_rate * T,
            L=self.L + self.L_rate * T,
            longPeri=self.longPeri + self.longPeri_rate * T,
            longNode=self.longNode + self.longNode_rate * T,
        )

    def at_epoch(self, days: float, cfg: EngineCfg = ENGINE_CFG) -> "OrbitalElements":
        return self.at(centuries_since_j2000(days, cfg))

    @property
    def perihelion(self) -> float:
        return self.a * (1.0 - self.e)

    @property
    def aphelion(self) -> float:
        return self.a * (1.0 + self.e)


__all__ = ["OrbitalElements", "centuries_since_j2000"]

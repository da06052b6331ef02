"""Planetary reference data.

Mean elements and per-century rates are the JPL approximate Keplerian
elements at J2000, valid 1800 AD - 2050 AD and usable well beyond that for
display purposes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from orrery.core.elements import OrbitalElements
from orrery.core.model import CelestialBody


@dataclass(frozen=True)
class SunData:
    radius: float
    color: str
    glow_color: str


PLANET_DEFINITIONS: tuple[CelestialBody, ...] = (
    CelestialBody(
        id="mercury",
        name="Mercury",
        radius=0.8,
        rotation_speed=0.017,
        orbital_period=87.969,
        elements=OrbitalElements(
            a=0.38709893, a_rate=0.00000066,
            e=0.20563069, e_rate=0.00002527,
            i=7.00487, i_rate=-0.00594749,
            L=252.25084, L_rate=149472.6741,
            longPeri=77.45645, longPeri_rate=0.15935,
            longNode=48.33167, longNode_rate=-0.12534,
        ),
        color="#A5A5A5",
        description="The smallest and closest planet to the Sun.",
        facts={
            "mass": "3.285 × 10^23 kg",
            "gravity": "3.7 m/s²",
            "temp": "167°C",
            "distance": "0.39 AU",
        },
    ),
    CelestialBody(
        id="venus",
        name="Venus",
        radius=1.2,
        rotation_speed=0.004,
        orbital_period=224.7,
        elements=OrbitalElements(
            a=0.72333199, a_rate=0.00000092,
            e=0.00677323, e_rate=-0.00004938,
            i=3.39471, i_rate=-0.0007889,
            L=181.97973, L_rate=58517.8153,
            longPeri=131.53298, longPeri_rate=0.00213,
            longNode=76.68069, longNode_rate=-0.27769,
        ),
        color="#E3BB76",
        atmosphere_color="#FFCC88",
        description="Earth's twin in size with a thick, toxic atmosphere.",
        facts={
            "mass": "4.867 × 10^24 kg",
            "gravity": "8.87 m/s²",
            "temp": "464°C",
            "distance": "0.72 AU",
        },
    ),
    CelestialBody(
        id="earth",
        name="Earth",
        radius=1.3,
        rotation_speed=1.0,
        orbital_period=365.25,
        elements=OrbitalElements(
            a=1.00000011, a_rate=-0.00000005,
            e=0.01671022, e_rate=-0.00003804,
            i=0.00005, i_rate=-0.01300,
            L=100.46435, L_rate=35999.3724,
            longPeri=102.94719, longPeri_rate=0.32327,
            longNode=-11.26064, longNode_rate=-0.44523,
        ),
        color="#2271B3",
        atmosphere_color="#44AAFF",
        description="Our home planet, the only known world with life.",
        facts={
            "mass": "5.972 × 10^24 kg",
            "gravity": "9.81 m/s²",
            "temp": "15°C",
            "distance": "1.00 AU",
        },
    ),
    CelestialBody(
        id="mars",
        name="Mars",
        radius=1.0,
        rotation_speed=0.97,
        orbital_period=686.98,
        elements=OrbitalElements(
            a=1.52366231, a_rate=-0.00007221,
            e=0.09341233, e_rate=0.00011902,
            i=1.85061, i_rate=-0.00813,
            L=355.45332, L_rate=19140.3026,
            longPeri=336.04084, longPeri_rate=0.4411,
            longNode=49.57854, longNode_rate=-0.2941,
        ),
        color="#E27B58",
        atmosphere_color="#FF8866",
        description="The Red Planet, home to the solar system's largest volcano.",
        facts={
            "mass": "6.39 × 10^23 kg",
            "gravity": "3.72 m/s²",
            "temp": "-65°C",
            "distance": "1.52 AU",
        },
    ),
    CelestialBody(
        id="jupiter",
        name="Jupiter",
        radius=4.5,
        rotation_speed=2.4,
        orbital_period=4332.6,
        elements=OrbitalElements(
            a=5.20336301, a_rate=0.00060737,
            e=0.04839266, e_rate=-0.0001288,
            i=1.30530, i_rate=-0.00415,
            L=34.40438, L_rate=3034.7461,
            longPeri=14.75385, longPeri_rate=0.16129,
            longNode=100.55615, longNode_rate=0.20469,
        ),
        color="#D39C7E",
        description="The king of the planets, a massive gas giant.",
        facts={
            "mass": "1.898 × 10^27 kg",
            "gravity": "24.79 m/s²",
            "temp": "-110°C",
            "distance": "5.20 AU",
        },
    ),
    CelestialBody(
        id="saturn",
        name="Saturn",
        radius=4.0,
        rotation_speed=2.2,
        orbital_period=10759.2,
        elements=OrbitalElements(
            a=9.53707032, a_rate=-0.0030153,
            e=0.05415060, e_rate=-0.0003676,
            i=2.48446, i_rate=0.00611,
            L=49.94432, L_rate=1222.4944,
            longPeri=92.43194, longPeri_rate=-0.0392,
            longNode=113.71504, longNode_rate=-0.2591,
        ),
        color="#C5AB6E",
        has_rings=True,
        description="Famous for its complex and beautiful ring system.",
        facts={
            "mass": "5.683 × 10^26 kg",
            "gravity": "10.44 m/s²",
            "temp": "-140°C",
            "distance": "9.54 AU",
        },
    ),
    CelestialBody(
        id="uranus",
        name="Uranus",
        radius=2.5,
        rotation_speed=1.4,
        orbital_period=30685.4,
        elements=OrbitalElements(
            a=19.19126393, a_rate=0.0015202,
            e=0.04716771, e_rate=-0.0001915,
            i=0.76986, i_rate=0.00026,
            L=313.23218, L_rate=428.4820,
            longPeri=170.96424, longPeri_rate=0.0779,
            longNode=74.22988, longNode_rate=-0.0975,
        ),
        color="#B5E3E3",
        description="An ice giant that rotates on its side.",
        facts={
            "mass": "8.681 × 10^25 kg",
            "gravity": "8.69 m/s²",
            "temp": "-195°C",
            "distance": "19.22 AU",
        },
    ),
    CelestialBody(
        id="neptune",
        name="Neptune",
        radius=2.4,
        rotation_speed=1.5,
        orbital_period=60190.0,
        elements=OrbitalElements(
            a=30.06896348, a_rate=-0.0012519,
            e=0.00858587, e_rate=0.0000251,
            i=1.76917, i_rate=-0.00035,
            L=304.88003, L_rate=218.4594,
            longPeri=44.97135, longPeri_rate=-0.3224,
            longNode=131.72169, longNode_rate=-0.0025,
        ),
        color="#4B70DD",
        atmosphere_color="#6688FF",
        description="A blue ice giant with the fastest winds in the solar system.",
        facts={
            "mass": "1.024 × 10^26 kg",
            "gravity": "11.15 m/s²",
            "temp": "-201°C",
            "distance": "30.1 AU",
        },
    ),
)

PLANETS_BY_ID: dict[str, CelestialBody] = {planet.id: planet for planet in PLANET_DEFINITIONS}
PLANET_DISPLAY_ORDER: list[str] = [planet.id for planet in PLANET_DEFINITIONS]
SUN = SunData(radius=12.0, color="#FFCC00", glow_color="#FF4400")


def select_planets(ids: Iterable[str] | None = None) -> tuple[CelestialBody, ...]:
    """Planets named by ``ids``, in display order; all of them for ``None``.

    Unknown ids raise :class:`KeyError`; an empty selection raises
    :class:`ValueError`.
    """

    if ids is None:
        return PLANET_DEFINITIONS
    wanted = {key.strip().lower() for key in ids if key.strip()}
    if not wanted:
        raise ValueError("No planets selected")
    unknown = sorted(wanted.difference(PLANETS_BY_ID))
    if unknown:
        raise KeyError(f"Unknown planet(s): {', '.join(unknown)}")
    return tuple(PLANETS_BY_ID[key] for key in PLANET_DISPLAY_ORDER if key in wanted)


__all__ = [
    "PLANET_DEFINITIONS",
    "PLANET_DISPLAY_ORDER",
    "PLANETS_BY_ID",
    "SUN",
    "SunData",
    "select_planets",
]

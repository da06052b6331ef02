import math
import unittest

import numpy as np

from orrery.core.elements import OrbitalElements, centuries_since_j2000
from orrery.core.propagator import heliocentric_position, orbital_plane, propagate
from orrery.data.planets import PLANET_DEFINITIONS, PLANETS_BY_ID


class TestElementModel(unittest.TestCase):

    def test_zero_offset_returns_base_elements(self):
        for planet in PLANET_DEFINITIONS:
            base = planet.elements
            current = base.at(0.0)
            self.assertEqual(current.a, base.a)
            self.assertEqual(current.e, base.e)
            self.assertEqual(current.i, base.i)
            self.assertEqual(current.L, base.L)
            self.assertEqual(current.longPeri, base.longPeri)
            self.assertEqual(current.longNode, base.longNode)

    def test_rates_apply_per_century(self):
        elements = OrbitalElements(a=1.0, e=0.1, i=2.0, L=10.0, longPeri=20.0, longNode=30.0,
                                   a_rate=0.5, e_rate=0.01, i_rate=-1.0, L_rate=360.0,
                                   longPeri_rate=2.0, longNode_rate=-3.0)
        current = elements.at_epoch(2 * 36525.0)
        self.assertAlmostEqual(current.a, 2.0)
        self.assertAlmostEqual(current.e, 0.12)
        self.assertAlmostEqual(current.i, 0.0)
        self.assertAlmostEqual(current.L, 730.0)
        self.assertAlmostEqual(current.longPeri, 24.0)
        self.assertAlmostEqual(current.longNode, 24.0)

    def test_missing_rates_default_to_zero(self):
        elements = OrbitalElements(a=2.0, e=0.1, i=1.0, L=5.0, longPeri=6.0, longNode=7.0)
        self.assertEqual(elements.at(12.5), elements)

    def test_centuries_conversion(self):
        self.assertEqual(centuries_since_j2000(36525.0), 1.0)
        self.assertEqual(centuries_since_j2000(-18262.5), -0.5)


class TestHeliocentricPosition(unittest.TestCase):

    def test_radius_within_apsides_for_all_bodies(self):
        epochs = np.linspace(-365250.0, 365250.0, 157)
        for planet in PLANET_DEFINITIONS:
            for days in epochs:
                current = planet.elements.at_epoch(float(days))
                r = float(np.linalg.norm(heliocentric_position(current)))
                tol = 1e-12 * current.a
                self.assertGreaterEqual(r, current.a * (1.0 - current.e) - tol, planet.id)
                self.assertLessEqual(r, current.a * (1.0 + current.e) + tol, planet.id)

    def test_earth_scenario_at_j2000(self):
        elements = OrbitalElements(a=1.0, e=0.0167, i=0.0, L=100.46, longPeri=102.95, longNode=-11.26)
        position = propagate(elements, 0.0)
        r = float(np.linalg.norm(position))
        self.assertGreaterEqual(r, 0.983)
        self.assertLessEqual(r, 1.017)
        # Just before perihelion: heliocentric longitude a little below longPeri.
        longitude = math.degrees(math.atan2(position[1], position[0]))
        self.assertAlmostEqual(longitude, 100.38, delta=0.5)
        self.assertAlmostEqual(position[2], 0.0, places=12)

    def test_reference_earth_near_perihelion_band(self):
        r = float(np.linalg.norm(propagate(PLANETS_BY_ID["earth"].elements, 0.0)))
        self.assertGreater(r, 0.983)
        self.assertLess(r, 0.984)

    def test_inclined_orbit_leaves_ecliptic(self):
        mercury = PLANETS_BY_ID["mercury"].elements
        z = [propagate(mercury, d)[2] for d in np.linspace(0.0, 88.0, 23)]
        max_z = max(abs(v) for v in z)
        # sin(7 deg) * aphelion bounds the out-of-plane excursion.
        self.assertGreater(max_z, 0.03)
        self.assertLessEqual(max_z, math.sin(math.radians(7.1)) * mercury.aphelion)

    def test_position_is_deterministic(self):
        jupiter = PLANETS_BY_ID["jupiter"].elements
        first = propagate(jupiter, 12345.678)
        second = propagate(jupiter, 12345.678)
        np.testing.assert_array_equal(first, second)

    def test_negative_eccentricity_term_is_guarded(self):
        x_p, y_p = orbital_plane(1.0, 1.2, 0.5)
        self.assertEqual(y_p, 0.0)
        self.assertFalse(math.isnan(x_p))

    def test_period_roughly_matches_reference(self):
        earth = PLANETS_BY_ID["earth"]
        start = propagate(earth.elements, 0.0)
        after_one_period = propagate(earth.elements, earth.orbital_period)
        np.testing.assert_allclose(after_one_period, start, atol=2e-3)


if __name__ == "__main__":
    unittest.main()

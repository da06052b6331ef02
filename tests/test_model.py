import math
import unittest

import numpy as np

from orrery.core.elements import OrbitalElements
from orrery.core.model import CelestialBody, Orrery
from orrery.core.propagator import propagate
from orrery.core.scale import ScaleMode, to_display
from orrery.core.timekeeping import SimulationClock
from orrery.data.planets import (
    PLANET_DEFINITIONS,
    PLANET_DISPLAY_ORDER,
    PLANETS_BY_ID,
    select_planets,
)


class TestPlanetData(unittest.TestCase):

    def test_eight_planets_in_order(self):
        self.assertEqual(
            PLANET_DISPLAY_ORDER,
            ["mercury", "venus", "earth", "mars", "jupiter", "saturn", "uranus", "neptune"],
        )
        semi_major = [PLANETS_BY_ID[key].elements.a for key in PLANET_DISPLAY_ORDER]
        self.assertEqual(semi_major, sorted(semi_major))

    def test_eccentricities_in_supported_range(self):
        for planet in PLANET_DEFINITIONS:
            self.assertGreaterEqual(planet.elements.e, 0.0)
            self.assertLess(planet.elements.e, 0.21)

    def test_select_planets(self):
        self.assertEqual(select_planets(), PLANET_DEFINITIONS)
        picked = select_planets(["Neptune", " earth ", "earth"])
        self.assertEqual([planet.id for planet in picked], ["earth", "neptune"])
        with self.assertRaises(KeyError):
            select_planets(["pluto"])
        with self.assertRaises(ValueError):
            select_planets([" "])


class TestOrrery(unittest.TestCase):

    def setUp(self):
        self.orrery = Orrery(PLANET_DEFINITIONS)

    def test_default_scale_is_visual(self):
        self.assertIs(self.orrery.scale_mode, ScaleMode.VISUAL)

    def test_evaluate_covers_all_bodies(self):
        states = self.orrery.evaluate(0.0)
        self.assertEqual(list(states), PLANET_DISPLAY_ORDER)
        for body_id, state in states.items():
            self.assertEqual(state.body_id, body_id)
            self.assertAlmostEqual(state.radius, float(np.linalg.norm(state.position)))
            self.assertAlmostEqual(
                float(np.linalg.norm(state.display_position)), state.display_radius, places=9
            )

    def test_states_match_standalone_propagation(self):
        days = 4321.5
        states = self.orrery.evaluate(days)
        for planet in PLANET_DEFINITIONS:
            expected = propagate(planet.elements, days)
            np.testing.assert_array_equal(states[planet.id].position, expected)
            np.testing.assert_array_equal(
                states[planet.id].display_position, to_display(expected, ScaleMode.VISUAL)
            )

    def test_display_order_matches_radius_order(self):
        for mode in ScaleMode:
            self.orrery.scale_mode = mode
            states = self.orrery.evaluate(0.0)
            radii = [states[key].radius for key in PLANET_DISPLAY_ORDER]
            display = [states[key].display_radius for key in PLANET_DISPLAY_ORDER]
            self.assertEqual(np.argsort(radii).tolist(), np.argsort(display).tolist())

    def test_scale_toggle_round_trip(self):
        before = self.orrery.evaluate(777.0)
        self.assertIs(self.orrery.toggle_scale(), ScaleMode.REAL)
        real = self.orrery.evaluate(777.0)
        self.assertIs(self.orrery.toggle_scale(), ScaleMode.VISUAL)
        after = self.orrery.evaluate(777.0)
        for key in PLANET_DISPLAY_ORDER:
            np.testing.assert_array_equal(before[key].display_position, after[key].display_position)
            np.testing.assert_array_equal(before[key].position, real[key].position)

    def test_rotation_phase_follows_epoch(self):
        earth = PLANETS_BY_ID["earth"]
        self.assertAlmostEqual(earth.rotation_phase(0.25), math.pi / 2)
        self.assertAlmostEqual(earth.rotation_phase(3.5), math.pi)
        self.assertAlmostEqual(earth.rotation_phase(-0.25), 3 * math.pi / 2)
        states = self.orrery.evaluate(0.25)
        self.assertAlmostEqual(states["earth"].rotation_phase, math.pi / 2)
        for state in states.values():
            self.assertGreaterEqual(state.rotation_phase, 0.0)
            self.assertLess(state.rotation_phase, 2 * math.pi)

    def test_calendar_jumps_turn_the_planets(self):
        clock = SimulationClock(10.0, running=False)
        clock.next_year()
        after_year = self.orrery.step(clock, 0.0).states["earth"].rotation_phase
        self.assertAlmostEqual(after_year, math.pi / 2)
        clock.next_month()
        after_month = self.orrery.step(clock, 0.0).states["earth"].rotation_phase
        self.assertAlmostEqual(after_month, (math.pi / 2 + 0.44 * 2 * math.pi) % (2 * math.pi))

    def test_selection(self):
        self.assertIsNone(self.orrery.selected)
        body = self.orrery.select("mars")
        self.assertEqual(body.name, "Mars")
        self.assertEqual(self.orrery.selected_id, "mars")
        self.assertEqual(self.orrery.select_index(2).id, "earth")
        self.assertIsNone(self.orrery.select_index(8))
        self.assertEqual(self.orrery.selected_id, "earth")
        self.orrery.select(None)
        self.assertIsNone(self.orrery.selected_id)

    def test_unknown_body(self):
        with self.assertRaises(KeyError):
            self.orrery.select("pluto")
        with self.assertRaises(KeyError):
            self.orrery.body("pluto")

    def test_selection_does_not_affect_propagation(self):
        before = self.orrery.evaluate(50.0)
        self.orrery.select("saturn")
        after = self.orrery.evaluate(50.0)
        for key in PLANET_DISPLAY_ORDER:
            np.testing.assert_array_equal(before[key].display_position, after[key].display_position)

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(ValueError):
            Orrery([PLANETS_BY_ID["earth"], PLANETS_BY_ID["earth"]])

    def test_body_at_origin_does_not_produce_nan(self):
        # a = 0 puts the body on the Sun.
        degenerate = CelestialBody(
            id="dot",
            name="Dot",
            elements=OrbitalElements(a=0.0, e=0.0, i=0.0, L=0.0, longPeri=0.0, longNode=0.0),
            radius=1.0,
            rotation_speed=0.0,
            orbital_period=1.0,
        )
        orrery = Orrery([degenerate])
        state = orrery.evaluate(10.0)["dot"]
        np.testing.assert_array_equal(state.display_position, np.zeros(3))
        self.assertEqual(state.radius, 0.0)
        self.assertEqual(state.display_radius, 0.0)
        orrery.toggle_scale()
        self.assertEqual(orrery.evaluate(10.0)["dot"].display_radius, 0.0)
        paths, _ = orrery.orbit_paths(10.0)
        self.assertFalse(np.isnan(paths["dot"]).any())


class TestStep(unittest.TestCase):

    def test_step_advances_clock_and_shares_epoch(self):
        orrery = Orrery(PLANET_DEFINITIONS)
        clock = SimulationClock(speed=30.0)
        frame = orrery.step(clock, 0.5)
        self.assertEqual(frame.days, 15.0)
        self.assertEqual(clock.days, 15.0)
        expected = orrery.evaluate(15.0)
        for key, state in frame.states.items():
            np.testing.assert_array_equal(state.position, expected[key].position)

    def test_paths_rebuild_on_scale_edge_only(self):
        orrery = Orrery(PLANET_DEFINITIONS)
        clock = SimulationClock(speed=100.0)
        first = orrery.step(clock, 1.0)
        self.assertTrue(first.paths_changed)
        second = orrery.step(clock, 1.0)
        self.assertFalse(second.paths_changed)
        self.assertIs(second.paths, first.paths)

        orrery.toggle_scale()
        third = orrery.step(clock, 1.0)
        self.assertTrue(third.paths_changed)
        self.assertIs(third.scale_mode, ScaleMode.REAL)
        self.assertFalse(orrery.step(clock, 1.0).paths_changed)

    def test_paused_clock_keeps_frame_epoch(self):
        orrery = Orrery(PLANET_DEFINITIONS)
        clock = SimulationClock(days=200.0, running=False)
        frames = [orrery.step(clock, 0.25) for _ in range(5)]
        self.assertTrue(all(frame.days == 200.0 for frame in frames))


if __name__ == "__main__":
    unittest.main()

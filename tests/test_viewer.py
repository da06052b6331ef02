import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame

from orrery.core.model import Orrery
from orrery.core.scale import ScaleMode
from orrery.core.timekeeping import SimulationClock
from orrery.data.planets import PLANET_DEFINITIONS, SUN
from orrery.render import Camera, draw_sun, hex_to_rgb, hud_lines
from orrery.viewer import ViewOptions, apply_shortcut


class TestShortcuts(unittest.TestCase):

    def setUp(self):
        self.clock = SimulationClock(days=100.0)
        self.orrery = Orrery(PLANET_DEFINITIONS)
        self.options = ViewOptions()

    def press(self, key):
        return apply_shortcut(key, self.clock, self.orrery, self.options)

    def test_space_toggles_pause(self):
        self.assertEqual(self.press(pygame.K_SPACE), "Paused")
        self.assertTrue(self.clock.paused)
        self.assertEqual(self.press(pygame.K_SPACE), "Resumed")
        self.assertTrue(self.clock.running)

    def test_time_jumps(self):
        self.press(pygame.K_RIGHTBRACKET)
        self.assertEqual(self.clock.days, 465.25)
        self.press(pygame.K_LEFTBRACKET)
        self.assertEqual(self.clock.days, 100.0)
        self.press(pygame.K_PERIOD)
        self.assertAlmostEqual(self.clock.days, 130.44)
        self.press(pygame.K_COMMA)
        self.assertAlmostEqual(self.clock.days, 100.0)

    def test_speed_keys(self):
        self.press(pygame.K_UP)
        self.assertEqual(self.clock.speed, 6.0)
        self.press(pygame.K_DOWN)
        self.press(pygame.K_DOWN)
        self.assertEqual(self.clock.speed, 0.0)

    def test_scale_toggle(self):
        self.assertEqual(self.press(pygame.K_v), "Real scale")
        self.assertIs(self.orrery.scale_mode, ScaleMode.REAL)

    def test_body_selection(self):
        self.assertEqual(self.press(pygame.K_3), "Tracking Earth")
        self.assertEqual(self.orrery.selected_id, "earth")
        self.press(pygame.K_0)
        self.assertIsNone(self.orrery.selected_id)

    def test_toggles_and_quit(self):
        self.press(pygame.K_l)
        self.press(pygame.K_g)
        self.assertFalse(self.options.show_labels)
        self.assertFalse(self.options.show_stars)
        self.assertIsNone(self.press(pygame.K_q))
        self.press(pygame.K_ESCAPE)
        self.assertTrue(self.options.quit_requested)


class TestRenderHelpers(unittest.TestCase):

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb("#2271B3"), (0x22, 0x71, 0xB3))
        with self.assertRaises(ValueError):
            hex_to_rgb("#fff")

    def test_draw_sun_uses_sun_colours(self):
        surface = pygame.Surface((120, 120))
        draw_sun(
            surface,
            (60, 60),
            10,
            color=hex_to_rgb(SUN.color),
            glow_color=hex_to_rgb(SUN.glow_color),
        )
        self.assertEqual(tuple(surface.get_at((60, 60)))[:3], (0xFF, 0xCC, 0x00))
        self.assertNotEqual(tuple(surface.get_at((60, 85)))[:3], (0, 0, 0))
        self.assertEqual(tuple(surface.get_at((0, 0)))[:3], (0, 0, 0))

    def test_camera_projection(self):
        camera = Camera((800, 600), 0.5, min_zoom=0.01, max_zoom=2.0)
        self.assertEqual(camera.world_to_screen(0.0, 0.0), (400, 300))
        self.assertEqual(camera.world_to_screen(100.0, 100.0), (450, 250))
        points = np.array([[0.0, 0.0, 5.0], [100.0, 100.0, -5.0]])
        self.assertEqual(camera.project_path(points), [(400, 300), (450, 250)])

    def test_camera_zoom_is_clamped(self):
        camera = Camera((800, 600), 0.5, min_zoom=0.01, max_zoom=2.0)
        camera.zoom_by_factor(100.0)
        self.assertEqual(camera.zoom_target, 2.0)
        camera.update(smoothing=1.0)
        self.assertEqual(camera.zoom, 2.0)

    def test_hud_lines(self):
        lines = hud_lines(
            date_text="January 01, 2000",
            speed=1.0,
            paused=True,
            scale_label="Visual",
            selected="Earth",
            text_color=(255, 255, 255),
            muted_color=(100, 100, 100),
        )
        texts = [text for text, _ in lines]
        self.assertEqual(texts[0], "JANUARY 01, 2000")
        self.assertIn("PAUSED", texts[1])
        self.assertIn("Tracking: Earth", texts)


if __name__ == "__main__":
    unittest.main()

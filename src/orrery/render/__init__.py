"""Rendering helpers for the orrery viewer."""

from .camera import Camera
from .assets import (
    get_text_surface,
    hex_to_rgb,
    load_font,
)
from .draw import (
    draw_body,
    draw_label,
    draw_orbit_line,
    draw_starfield,
    draw_sun,
    generate_starfield,
)
from .ui import (
    build_text_panel,
    hud_lines,
)

__all__ = [
    "Camera",
    "build_text_panel",
    "draw_body",
    "draw_label",
    "draw_orbit_line",
    "draw_starfield",
    "draw_sun",
    "generate_starfield",
    "get_text_surface",
    "hex_to_rgb",
    "hud_lines",
    "load_font",
]

"""Configuration dataclasses for the orrery engine and its hosts."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineCfg:
    days_per_century: float = 36_525.0
    kepler_iterations: int = 6
    path_iterations: int = 4
    path_segments: int = 180
    real_scale_factor: float = 1_200.0
    visual_offset: float = 80.0
    visual_exponent: float = 0.65
    visual_multiplier: float = 150.0

    @property
    def path_samples(self) -> int:
        return self.path_segments + 1


@dataclass(frozen=True)
class ClockCfg:
    default_speed: float = 1.0
    max_speed: float = 365.0
    speed_step: float = 5.0
    year_days: float = 365.25
    month_days: float = 30.44


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1200
    height: int = 860
    fps_limit: int = 60
    background_color: tuple[int, int, int] = (2, 4, 14)
    sun_pixel_radius: int = 10
    orbit_color: tuple[int, int, int, int] = (68, 68, 102, 110)
    orbit_selected_color: tuple[int, int, int, int] = (136, 204, 255, 230)
    orbit_line_width: int = 1
    orbit_selected_line_width: int = 2
    body_min_pixel_radius: int = 2
    body_pixel_scale: float = 2.2
    selected_body_scale: float = 1.15
    label_color: tuple[int, int, int] = (234, 241, 255)
    label_offset: int = 10
    hud_text_color: tuple[int, int, int] = (234, 241, 255)
    hud_muted_color: tuple[int, int, int] = (150, 165, 190)
    hud_background_color: tuple[int, int, int, int] = (12, 18, 30, 170)
    star_count: int = 260
    star_seed: int = 42
    # Pixels per render unit.
    default_zoom: float = 0.26
    min_zoom: float = 0.002
    max_zoom: float = 4.0
    zoom_step: float = 1.15
    camera_smoothing: float = 0.12
    font_names: tuple[str, ...] = ("consolas", "dejavusansmono", "couriernew")
    font_size: int = 15


ENGINE_CFG = EngineCfg()
CLOCK_CFG = ClockCfg()
RENDER_CFG = RenderCfg()


__all__ = ["CLOCK_CFG", "ENGINE_CFG", "RENDER_CFG", "ClockCfg", "EngineCfg", "RenderCfg"]

"""Interactive top-down orrery.

The window shows the display-space ecliptic plane: the orbit polylines, the
planets at the current epoch and a status panel. The clock and scale mode are
driven from the keyboard.
"""
from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from typing import Sequence

import pygame

from orrery.core.config import RENDER_CFG, RenderCfg
from orrery.core.model import Frame, Orrery
from orrery.core.scale import ScaleMode
from orrery.core.timekeeping import FrameTimer, SimulationClock, format_epoch
from orrery.data.planets import PLANET_DEFINITIONS, SUN
from orrery.logging_config import setup_logging
from orrery.render import (
    Camera,
    build_text_panel,
    draw_body,
    draw_label,
    draw_orbit_line,
    draw_starfield,
    draw_sun,
    generate_starfield,
    hex_to_rgb,
    hud_lines,
    load_font,
)

logger = logging.getLogger(__name__)

BODY_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
    pygame.K_6: 5,
    pygame.K_7: 6,
    pygame.K_8: 7,
}


@dataclass
class ViewOptions:
    show_labels: bool = True
    show_stars: bool = True
    quit_requested: bool = False


def apply_shortcut(
    key: int,
    clock: SimulationClock,
    orrery: Orrery,
    options: ViewOptions,
) -> str | None:
    """Apply a keyboard shortcut and return a short status message, if any."""

    if key == pygame.K_SPACE:
        return "Paused" if clock.toggle_pause() else "Resumed"
    if key == pygame.K_UP:
        return f"Speed {clock.speed_up():.0f} days/s"
    if key == pygame.K_DOWN:
        return f"Speed {clock.slow_down():.0f} days/s"
    if key == pygame.K_LEFTBRACKET:
        clock.previous_year()
        return "-1 Year"
    if key == pygame.K_RIGHTBRACKET:
        clock.next_year()
        return "+1 Year"
    if key == pygame.K_COMMA:
        clock.previous_month()
        return "-1 Month"
    if key == pygame.K_PERIOD:
        clock.next_month()
        return "+1 Month"
    if key == pygame.K_t:
        clock.jump_to_now()
        return "Current date reached"
    if key == pygame.K_v:
        return f"{orrery.toggle_scale().label} scale"
    if key == pygame.K_l:
        options.show_labels = not options.show_labels
        return None
    if key == pygame.K_g:
        options.show_stars = not options.show_stars
        return None
    if key in (pygame.K_0, pygame.K_r):
        orrery.select(None)
        return "Orientation reset"
    if key in BODY_KEYS:
        body = orrery.select_index(BODY_KEYS[key])
        return f"Tracking {body.name}" if body is not None else None
    if key == pygame.K_ESCAPE:
        options.quit_requested = True
    return None


def _body_pixel_radius(radius: float, selected: bool, render_cfg: RenderCfg) -> int:
    scale = render_cfg.selected_body_scale if selected else 1.0
    return max(render_cfg.body_min_pixel_radius, int(radius * render_cfg.body_pixel_scale * scale))


def draw_frame(
    screen: pygame.Surface,
    orbit_layer: pygame.Surface,
    frame: Frame,
    orrery: Orrery,
    clock: SimulationClock,
    camera: Camera,
    *,
    options: ViewOptions,
    starfield: list[dict[str, object]],
    font: pygame.font.Font,
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    screen.fill(render_cfg.background_color)
    if options.show_stars:
        draw_starfield(screen, starfield)

    selected_id = orrery.selected_id
    orbit_layer.fill((0, 0, 0, 0))
    for body in orrery.bodies:
        points = camera.project_path(frame.paths[body.id])
        if body.id == selected_id:
            draw_orbit_line(
                orbit_layer,
                render_cfg.orbit_selected_color,
                points,
                render_cfg.orbit_selected_line_width,
            )
        else:
            draw_orbit_line(orbit_layer, render_cfg.orbit_color, points, render_cfg.orbit_line_width)
    screen.blit(orbit_layer, (0, 0))

    draw_sun(
        screen,
        camera.world_to_screen(0.0, 0.0),
        max(render_cfg.sun_pixel_radius, int(SUN.radius * camera.zoom)),
        color=hex_to_rgb(SUN.color),
        glow_color=hex_to_rgb(SUN.glow_color),
    )

    for body in orrery.bodies:
        state = frame.states[body.id]
        selected = body.id == selected_id
        position = camera.world_to_screen(state.display_position[0], state.display_position[1])
        radius = _body_pixel_radius(body.radius, selected, render_cfg)
        draw_body(
            screen,
            position,
            radius,
            color=hex_to_rgb(body.color),
            rotation_phase=state.rotation_phase,
            has_rings=body.has_rings,
            highlighted=selected,
        )
        if options.show_labels:
            draw_label(
                screen,
                font,
                body.name,
                position,
                color=render_cfg.label_color,
                offset=radius + render_cfg.label_offset,
            )

    selected = orrery.selected
    panel = build_text_panel(
        font,
        hud_lines(
            date_text=format_epoch(clock.days),
            speed=clock.speed,
            paused=clock.paused,
            scale_label=frame.scale_mode.label,
            selected=selected.name if selected is not None else None,
            text_color=render_cfg.hud_text_color,
            muted_color=render_cfg.hud_muted_color,
        ),
        background_color=render_cfg.hud_background_color,
    )
    screen.blit(panel, (16, 16))


def run_viewer(
    clock: SimulationClock,
    orrery: Orrery,
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    pygame.init()
    pygame.display.set_caption("Orrery")
    screen = pygame.display.set_mode((render_cfg.width, render_cfg.height), pygame.RESIZABLE)
    orbit_layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    font = load_font(render_cfg.font_names, render_cfg.font_size)
    starfield = generate_starfield(
        render_cfg.star_count,
        size=screen.get_size(),
        rng=random.Random(render_cfg.star_seed),
    )
    camera = Camera(
        screen.get_size(),
        render_cfg.default_zoom,
        min_zoom=render_cfg.min_zoom,
        max_zoom=render_cfg.max_zoom,
    )
    options = ViewOptions()
    pg_clock = pygame.time.Clock()
    timer = FrameTimer()

    try:
        while not options.quit_requested:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    options.quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    message = apply_shortcut(event.key, clock, orrery, options)
                    if message:
                        logger.info(message)
                elif event.type == pygame.MOUSEWHEEL:
                    factor = render_cfg.zoom_step if event.y > 0 else 1.0 / render_cfg.zoom_step
                    camera.zoom_by_factor(factor)
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                    orbit_layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
                    camera.update_size(screen.get_size())

            frame = orrery.step(clock, timer.tick())

            selected = orrery.selected_id
            if selected is not None:
                target = frame.states[selected].display_position
                camera.set_target((target[0], target[1]))
            else:
                camera.set_target((0.0, 0.0))
            camera.update(render_cfg.camera_smoothing)

            draw_frame(
                screen,
                orbit_layer,
                frame,
                orrery,
                clock,
                camera,
                options=options,
                starfield=starfield,
                font=font,
                render_cfg=render_cfg,
            )
            pygame.display.flip()
            pg_clock.tick(render_cfg.fps_limit)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive top-down solar system orrery.")
    parser.add_argument("--date", default=None, help="Start date (ISO 8601); defaults to J2000")
    parser.add_argument("--speed", type=float, default=None, help="Simulated days per real second")
    parser.add_argument("--real-scale", action="store_true", help="Start in the linear real scale")
    parser.add_argument("--paused", action="store_true", help="Start paused")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"Unknown log level: {args.log_level}")
    setup_logging(level)

    try:
        clock = SimulationClock(speed=args.speed, running=not args.paused)
        if args.date:
            clock.set_date(args.date)
    except ValueError as exc:
        parser.error(str(exc))

    mode = ScaleMode.REAL if args.real_scale else ScaleMode.VISUAL
    orrery = Orrery(PLANET_DEFINITIONS, scale_mode=mode)
    run_viewer(clock, orrery)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

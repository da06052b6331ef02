from __future__ import annotations

import math
import random
from typing import Iterable, Sequence

import pygame

from .assets import Color, get_text_surface


def draw_sun(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    color: tuple[int, int, int],
    glow_color: tuple[int, int, int],
) -> None:
    if radius <= 0:
        return
    glow_radius = radius * 3
    glow_surface = pygame.Surface((glow_radius * 2, glow_radius * 2), pygame.SRCALPHA)
    pygame.draw.circle(glow_surface, (*glow_color, 40), (glow_radius, glow_radius), glow_radius)
    pygame.draw.circle(
        glow_surface,
        (*glow_color, 90),
        (glow_radius, glow_radius),
        max(1, int(glow_radius * 0.55)),
    )
    surface.blit(glow_surface, glow_surface.get_rect(center=position))
    pygame.draw.circle(surface, color, position, radius)


def draw_body(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    color: tuple[int, int, int],
    rotation_phase: float,
    has_rings: bool = False,
    highlighted: bool = False,
) -> None:
    if radius <= 0:
        return
    if has_rings:
        ring_rect = pygame.Rect(0, 0, radius * 5, radius * 2)
        ring_rect.center = position
        pygame.draw.ellipse(surface, (*color, 160), ring_rect, 1)
    pygame.draw.circle(surface, color, position, radius)
    if radius >= 4:
        # Meridian tick so spin is visible.
        tip = (
            position[0] + int(math.cos(rotation_phase) * radius),
            position[1] - int(math.sin(rotation_phase) * radius),
        )
        pygame.draw.line(surface, (20, 20, 30), position, tip, 1)
    if highlighted:
        pygame.draw.circle(surface, (255, 255, 255), position, radius + 4, 1)


def draw_label(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    position: tuple[int, int],
    *,
    color: tuple[int, int, int],
    offset: int,
) -> None:
    label = get_text_surface(font, text, color)
    rect = label.get_rect(midbottom=(position[0], position[1] - offset))
    surface.blit(label, rect)


def generate_starfield(
    num_stars: int,
    *,
    size: tuple[int, int],
    rng: random.Random | None = None,
) -> list[dict[str, object]]:
    rng = rng or random.Random()
    width, height = size
    stars: list[dict[str, object]] = []
    for _ in range(num_stars):
        x = rng.uniform(0, width)
        y = rng.uniform(0, height)
        radius = rng.choice([1, 1, 1, 2])
        alpha = rng.randint(80, 150)
        base = rng.randint(200, 240)
        color = (
            max(0, base - rng.randint(10, 25)),
            max(0, base - rng.randint(5, 15)),
            base,
        )
        star_surface = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(star_surface, (*color, alpha), (radius, radius), radius)
        stars.append({"pos": (x, y), "surface": star_surface, "radius": radius})
    return stars


def draw_starfield(surface: pygame.Surface, starfield: Iterable[dict[str, object]]) -> None:
    width, height = surface.get_size()
    for star in starfield:
        base_x, base_y = star["pos"]  # type: ignore[index]
        star_surface = star["surface"]  # type: ignore[index]
        radius = star["radius"]  # type: ignore[index]
        sx = int(base_x % width)
        sy = int(base_y % height)
        surface.blit(star_surface, (sx - radius, sy - radius))


def draw_orbit_line(
    surface: pygame.Surface,
    color: Color,
    points: Sequence[tuple[int, int]],
    width: int,
) -> None:
    if len(points) < 2:
        return
    if width <= 1:
        pygame.draw.aalines(surface, color, False, points)
    else:
        pygame.draw.lines(surface, color, False, points, width)
        pygame.draw.aalines(surface, color, False, points)

from __future__ import annotations

from typing import Sequence

import pygame

from .assets import Color, get_text_surface


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[tuple[str, tuple[int, int, int]]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(font.size(text)[0] for text, _ in lines) + padding_x * 2
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(
        panel_surface,
        background_color,
        panel_surface.get_rect(),
        border_radius=12,
    )
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        text_surf = get_text_surface(font, text, color)
        panel_surface.blit(text_surf, (padding_x, padding_y + idx * line_height))
    return panel_surface


def hud_lines(
    *,
    date_text: str,
    speed: float,
    paused: bool,
    scale_label: str,
    selected: str | None,
    text_color: tuple[int, int, int],
    muted_color: tuple[int, int, int],
) -> list[tuple[str, tuple[int, int, int]]]:
    """Rows of the status panel shown in the corner of the viewer."""

    state = "PAUSED" if paused else "RUNNING"
    lines = [
        (date_text.upper(), text_color),
        (f"{state}  {speed:.1f} days/s", text_color),
        (f"Scale: {scale_label}", muted_color),
    ]
    if selected:
        lines.append((f"Tracking: {selected}", text_color))
    lines.append(("Space pause  [ ] year  , . month  T today  V scale", muted_color))
    return lines

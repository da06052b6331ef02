from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


@dataclass
class CameraState:
    center: np.ndarray
    target: np.ndarray
    zoom: float
    zoom_target: float


class Camera:
    """Top-down camera over the display-space ecliptic plane.

    ``zoom`` is pixels per render unit. ``update`` eases the center and zoom
    toward their targets each frame.
    """

    def __init__(
        self,
        size: tuple[int, int],
        zoom: float,
        *,
        min_zoom: float,
        max_zoom: float,
    ) -> None:
        self._size = size
        self._min_zoom = min_zoom
        self._max_zoom = max_zoom
        zoom = _clamp(zoom, min_zoom, max_zoom)
        self._state = CameraState(
            center=np.zeros(2, dtype=float),
            target=np.zeros(2, dtype=float),
            zoom=zoom,
            zoom_target=zoom,
        )

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def update_size(self, size: tuple[int, int]) -> None:
        self._size = size

    @property
    def zoom(self) -> float:
        return self._state.zoom

    @property
    def zoom_target(self) -> float:
        return self._state.zoom_target

    @property
    def center(self) -> np.ndarray:
        return self._state.center

    def set_target(self, position: tuple[float, float]) -> None:
        self._state.target[:] = position

    def set_zoom_target(self, zoom: float) -> None:
        self._state.zoom_target = _clamp(zoom, self._min_zoom, self._max_zoom)

    def zoom_by_factor(self, factor: float) -> None:
        self.set_zoom_target(self._state.zoom_target * factor)

    def update(self, smoothing: float = 0.1) -> None:
        state = self._state
        state.zoom += (state.zoom_target - state.zoom) * smoothing
        state.zoom = _clamp(state.zoom, self._min_zoom, self._max_zoom)
        state.center += (state.target - state.center) * smoothing

    def world_to_screen(self, x: float, y: float) -> tuple[int, int]:
        width, height = self._size
        cx, cy = self._state.center
        sx = width // 2 + int((x - cx) * self._state.zoom)
        sy = height // 2 - int((y - cy) * self._state.zoom)
        return sx, sy

    def project_path(self, points: np.ndarray) -> list[tuple[int, int]]:
        """Screen coordinates for the x/y columns of an ``(n, 3)`` polyline."""

        width, height = self._size
        cx, cy = self._state.center
        sx = width // 2 + ((points[:, 0] - cx) * self._state.zoom).astype(int)
        sy = height // 2 - ((points[:, 1] - cy) * self._state.zoom).astype(int)
        return list(zip(sx.tolist(), sy.tolist()))

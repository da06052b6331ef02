"""Simulated epoch ownership and wall-clock timing."""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from .config import CLOCK_CFG, ClockCfg

logger = logging.getLogger(__name__)

# Local midnight, 2000-01-01. Naive datetimes are compared against it as-is.
J2000 = datetime(2000, 1, 1)
SECONDS_PER_DAY = 86_400.0


def days_since_j2000(when: date | datetime | str) -> float:
    """Fractional days from J2000 to ``when``.

    Accepts a :class:`datetime.date`, a :class:`datetime.datetime` or an ISO
    8601 string. Aware datetimes are converted to local time first.
    """

    if isinstance(when, str):
        try:
            when = datetime.fromisoformat(when.strip())
        except ValueError as exc:
            raise ValueError(f"Unrecognised date: {when!r}") from exc
    if isinstance(when, datetime):
        if when.tzinfo is not None:
            when = when.astimezone().replace(tzinfo=None)
    else:
        when = datetime(when.year, when.month, when.day)
    return (when - J2000).total_seconds() / SECONDS_PER_DAY


def epoch_to_datetime(days: float) -> datetime:
    """Local datetime at ``days`` after J2000.

    Raises :class:`ValueError` for epochs outside the calendar range of
    :mod:`datetime` (years 1-9999).
    """

    try:
        return J2000 + timedelta(days=days)
    except OverflowError as exc:
        raise ValueError(f"Epoch {days!r} is outside the calendar range") from exc


def epoch_to_date(days: float) -> date:
    """Calendar date of the day containing ``days``."""

    return epoch_to_datetime(math.floor(days)).date()


def format_epoch(days: float, fmt: str = "%B %d, %Y") -> str:
    """Human readable date for ``days``.

    Epochs outside the calendar range fall back to a year offset from J2000.
    """

    try:
        return epoch_to_date(days).strftime(fmt)
    except ValueError:
        return f"J2000 {days / 365.25:+,.0f} yr"


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


@dataclass
class FrameTimer:
    """High resolution timer based on :func:`time.perf_counter`."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick(self) -> float:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        return dt

    def reset(self) -> None:
        self.last_time = time.perf_counter()


class SimulationClock:
    """Owner of the simulated epoch, in days since J2000.

    The clock is the only writer of the epoch. Every setter applies at once
    and is seen by the next evaluation; there is no smoothing across jumps.
    """

    def __init__(
        self,
        days: float = 0.0,
        *,
        speed: float | None = None,
        running: bool = True,
        cfg: ClockCfg = CLOCK_CFG,
    ) -> None:
        self._cfg = cfg
        self._days = _require_finite("days", days)
        self._speed = 0.0
        self.set_speed(cfg.default_speed if speed is None else speed)
        self._running = running

    @property
    def days(self) -> float:
        return self._days

    @property
    def speed(self) -> float:
        """Simulated days per real second."""

        return self._speed

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return not self._running

    @property
    def date(self) -> date | None:
        """Calendar date of the epoch, or ``None`` outside years 1-9999."""

        try:
            return epoch_to_date(self._days)
        except ValueError:
            return None

    def pause(self) -> None:
        if self._running:
            self._running = False
            logger.info("Simulation paused at day %.3f", self._days)

    def resume(self) -> None:
        if not self._running:
            self._running = True
            logger.info("Simulation resumed at day %.3f", self._days)

    def toggle_pause(self) -> bool:
        """Flip between running and paused; return ``True`` if now paused."""

        if self._running:
            self.pause()
        else:
            self.resume()
        return self.paused

    def tick(self, dt_seconds: float) -> float:
        """Advance by ``dt_seconds`` of wall-clock time and return the epoch."""

        if self._running and dt_seconds > 0.0 and self._speed > 0.0:
            self._days += dt_seconds * self._speed
        return self._days

    def set_speed(self, speed: float) -> float:
        speed = _require_finite("speed", speed)
        clamped = max(0.0, min(self._cfg.max_speed, speed))
        if clamped != self._speed:
            logger.debug("Speed set to %.1f days/s", clamped)
        self._speed = clamped
        return clamped

    def speed_up(self) -> float:
        return self.set_speed(self._speed + self._cfg.speed_step)

    def slow_down(self) -> float:
        return self.set_speed(self._speed - self._cfg.speed_step)

    def set_epoch(self, days: float) -> None:
        self._days = _require_finite("days", days)
        logger.debug("Epoch set to day %.3f", self._days)

    def set_date(self, when: date | datetime | str) -> None:
        self.set_epoch(days_since_j2000(when))

    def shift(self, delta_days: float) -> float:
        self._days += _require_finite("delta_days", delta_days)
        logger.debug("Epoch shifted by %+.2f days", delta_days)
        return self._days

    def jump_to_now(self, now: datetime | None = None) -> None:
        self.set_date(now or datetime.now())

    def next_year(self) -> float:
        return self.shift(self._cfg.year_days)

    def previous_year(self) -> float:
        return self.shift(-self._cfg.year_days)

    def next_month(self) -> float:
        return self.shift(self._cfg.month_days)

    def previous_month(self) -> float:
        return self.shift(-self._cfg.month_days)


__all__ = [
    "FrameTimer",
    "J2000",
    "SimulationClock",
    "days_since_j2000",
    "epoch_to_date",
    "epoch_to_datetime",
    "format_epoch",
]

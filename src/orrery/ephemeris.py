"""Sweep the simulated clock over a date span, record states and plot them."""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from orrery.core.logging_utils import RunLogger
from orrery.core.model import CelestialBody, Frame, Orrery
from orrery.core.scale import ScaleMode
from orrery.core.timekeeping import SimulationClock, days_since_j2000, format_epoch
from orrery.data.planets import PLANET_DEFINITIONS, select_planets
from orrery.logging_config import setup_logging

logger = logging.getLogger(__name__)

FIGS_SUBDIR = "figs"


class ApsisTracker:
    """Flags perihelion and aphelion passages from successive radii."""

    def __init__(self) -> None:
        self._prev_r: Dict[str, float] = {}
        self._prev_dr: Dict[str, float] = {}

    def update(self, body_id: str, r: float) -> str | None:
        prev_r = self._prev_r.get(body_id)
        self._prev_r[body_id] = r
        if prev_r is None:
            return None
        dr = r - prev_r
        prev_dr = self._prev_dr.get(body_id)
        self._prev_dr[body_id] = dr
        if prev_dr is None:
            return None
        if prev_dr < 0.0 and dr >= 0.0:
            return "perihelion"
        if prev_dr > 0.0 and dr <= 0.0:
            return "aphelion"
        return None


@dataclass
class EphemerisRun:
    run_dir: Path
    days: np.ndarray
    radii: Dict[str, np.ndarray]
    last_frame: Frame
    events: List[tuple[float, str, str]] = field(default_factory=list)


def run_ephemeris(
    start: str,
    span_days: float,
    step_days: float,
    *,
    scale_mode: ScaleMode = ScaleMode.VISUAL,
    root_dir: str | Path = "data/runs",
    bodies: Sequence[CelestialBody] = PLANET_DEFINITIONS,
) -> EphemerisRun:
    """Step a paused clock from ``start`` over ``span_days`` and record each state."""

    if step_days <= 0.0:
        raise ValueError("step_days must be positive")
    if span_days < 0.0:
        raise ValueError("span_days must not be negative")

    clock = SimulationClock(running=False)
    clock.set_date(start)
    orrery = Orrery(bodies, scale_mode=scale_mode)
    apsides = ApsisTracker()

    steps = int(np.floor(span_days / step_days + 1e-9))
    day_samples: List[float] = []
    radii: Dict[str, List[float]] = {body.id: [] for body in orrery.bodies}
    events: List[tuple[float, str, str]] = []

    with RunLogger(root_dir) as run:
        run.write_meta(
            {
                "start": start,
                "start_days": clock.days,
                "span_days": span_days,
                "step_days": step_days,
                "scale_mode": scale_mode.value,
                "bodies": [body.id for body in orrery.bodies],
            }
        )
        run.log_event(clock.days, "start", {"date": format_epoch(clock.days, "%Y-%m-%d")})

        frame = orrery.step(clock, 0.0)
        for index in range(steps + 1):
            if index:
                clock.shift(step_days)
                frame = orrery.step(clock, 0.0)
            day_samples.append(frame.days)
            for body_id, state in frame.states.items():
                run.log_state(frame.days, state)
                radii[body_id].append(state.radius)
                event_type = apsides.update(body_id, state.radius)
                if event_type is not None:
                    events.append((frame.days, event_type, body_id))
                    run.log_event(frame.days, event_type, {"body": body_id, "r": state.radius})

        run.log_event(clock.days, "end", {"date": format_epoch(clock.days, "%Y-%m-%d")})
        run_dir = run.run_dir

    logger.info("Recorded %d steps for %d bodies in %s", steps + 1, len(radii), run_dir)
    return EphemerisRun(
        run_dir=run_dir,
        days=np.asarray(day_samples),
        radii={key: np.asarray(values) for key, values in radii.items()},
        last_frame=frame,
        events=events,
    )


def ensure_fig_dir(run_dir: Path) -> Path:
    fig_dir = run_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    return fig_dir


def plot_orbits(fig_dir: Path, frame: Frame, bodies: Sequence[CelestialBody]) -> Path:
    fig, ax = plt.subplots(figsize=(7, 7))
    ax.set_facecolor("#02040e")
    ax.scatter([0.0], [0.0], color="#FFCC00", s=80, label="Sun", zorder=3)
    for body in bodies:
        path = frame.paths[body.id]
        ax.plot(path[:, 0], path[:, 1], color=body.color, lw=1.0, alpha=0.6)
        state = frame.states[body.id]
        ax.scatter(
            [state.display_position[0]],
            [state.display_position[1]],
            color=body.color,
            s=25,
            label=body.name,
            zorder=4,
        )
    ax.set_aspect("equal", "box")
    ax.set_xlabel("x [render units]")
    ax.set_ylabel("y [render units]")
    ax.set_title(f"Orbits ({frame.scale_mode.label} scale) – {format_epoch(frame.days, '%Y-%m-%d')}")
    ax.legend(loc="upper right", fontsize="small")
    fig.tight_layout()
    out = fig_dir / f"orbits_{frame.scale_mode.value}.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def plot_radius(fig_dir: Path, run: EphemerisRun, bodies: Sequence[CelestialBody]) -> Path:
    fig, ax = plt.subplots(figsize=(8, 4.5))
    years = 2000.0 + run.days / 365.25
    for body in bodies:
        ax.plot(years, run.radii[body.id], color=body.color, label=body.name)
    ax.set_yscale("log")
    ax.set_xlabel("Year")
    ax.set_ylabel("r [AU]")
    ax.set_title("Heliocentric distance over time")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", fontsize="small")
    fig.tight_layout()
    out = fig_dir / "radius.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def print_summary(run: EphemerisRun, bodies: Sequence[CelestialBody]) -> None:
    print(f"Run: {run.run_dir.name}")
    print(f" Epoch span: {format_epoch(run.days[0], '%Y-%m-%d')} – {format_epoch(run.days[-1], '%Y-%m-%d')}")
    for body in bodies:
        radii = run.radii[body.id]
        print(f" {body.name:<8} r = {radii.min():.4f} – {radii.max():.4f} AU")
    if run.events:
        print(f" Apsis passages: {len(run.events)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Propagate the planets over a date span and record the ephemeris."
    )
    parser.add_argument("--start", default="2000-01-01", help="Start date (ISO 8601)")
    parser.add_argument("--days", type=float, default=3652.5, help="Span to cover, in days")
    parser.add_argument("--step", type=float, default=5.0, help="Step between samples, in days")
    parser.add_argument("--real-scale", action="store_true", help="Use the linear real scale")
    parser.add_argument(
        "--bodies", default=None, help="Comma-separated planet ids to record (default: all)"
    )
    parser.add_argument("--out", default="data/runs", help="Directory for run folders")
    parser.add_argument("--no-plots", action="store_true", help="Skip figure generation")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-file", default=None, help="Optional log file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"Unknown log level: {args.log_level}")
    setup_logging(level, args.log_file)

    try:
        days_since_j2000(args.start)
    except ValueError as exc:
        parser.error(str(exc))
    if args.step <= 0.0:
        parser.error("--step must be positive")
    if args.days < 0.0:
        parser.error("--days must not be negative")
    try:
        bodies = select_planets(args.bodies.split(",") if args.bodies else None)
    except (KeyError, ValueError) as exc:
        parser.error(exc.args[0])

    mode = ScaleMode.REAL if args.real_scale else ScaleMode.VISUAL
    run = run_ephemeris(
        args.start, args.days, args.step, scale_mode=mode, root_dir=args.out, bodies=bodies
    )

    if not args.no_plots:
        fig_dir = ensure_fig_dir(run.run_dir)
        plot_orbits(fig_dir, run.last_frame, bodies)
        plot_radius(fig_dir, run, bodies)
        logger.info("Figures written to %s", fig_dir)

    print_summary(run, bodies)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

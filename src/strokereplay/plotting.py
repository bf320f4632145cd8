"""Matplotlib rendering of captured strokes and kinematic charts."""

from __future__ import annotations

import os
from collections.abc import Sequence

import matplotlib.pyplot as plt

from .data.processing import points_to_array
from .data.stroke import Stroke
from .kinematics import ChartDomain, KinematicSeries
from .scrubber import ScrubPosition


def plot_kinematics(
    series: KinematicSeries,
    path: str,
    cursor: ScrubPosition | None = None,
    title: str | None = None,
) -> None:
    """Save a two-panel figure: displacement vs time and velocity.

    The velocity panel uses ``series.velocity_domain`` for its x axis. A
    ``cursor`` draws the synchronized scrub position on both panels.

    Raises:
        ValueError: if ``series`` has no records.
    """
    if series.is_empty:
        raise ValueError("Cannot plot an empty kinematic series")

    fig, (ax_disp, ax_vel) = plt.subplots(2, 1, figsize=(8, 6))

    disp = series.displacement
    ax_disp.step(disp[:, 0], disp[:, 1], where="post", color="tab:blue", linewidth=1.2)
    ax_disp.plot(disp[:, 0], disp[:, 1], "o", color="tab:blue", markersize=2)
    ax_disp.set_xlim(*series.time_scale.domain)
    ax_disp.set_xlabel("time (s)")
    ax_disp.set_ylabel("cumulative distance (px)")

    domain = series.velocity_domain
    vel = series.velocity
    ax_vel.step(vel[:, 0], vel[:, 1], where="post", color="tab:orange", linewidth=1.2)
    if domain is ChartDomain.TIME:
        ax_vel.set_xlim(*series.time_scale.domain)
        ax_vel.set_xlabel("time (s)")
    else:
        ax_vel.set_xlim(*series.distance_scale.domain)
        ax_vel.set_xlabel("cumulative distance (px)")
    ax_vel.set_ylabel("velocity (px/s)")

    if cursor is not None:
        ax_disp.axvline(cursor.time, color="red", linewidth=0.8)
        ax_disp.axhline(cursor.distance, color="red", linewidth=0.5, linestyle="--")
        x = cursor.time if domain is ChartDomain.TIME else cursor.distance
        ax_vel.axvline(x, color="red", linewidth=0.8)

    if title:
        fig.suptitle(title, fontsize=10)
    fig.tight_layout()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)


def plot_strokes(strokes: Sequence[Stroke], path: str, width: int = 600, height: int = 300) -> None:
    """Save a preview of captured strokes on the encoder's canvas."""
    fig, ax = plt.subplots(figsize=(width / 100, height / 100))
    for stroke in strokes:
        pts = points_to_array(stroke.points)
        ax.plot(pts[:, 0], pts[:, 1], color="#333", linewidth=1.0)
    ax.set_xlim(0, width)
    ax.set_ylim(0, height)
    ax.set_aspect("equal")
    ax.invert_yaxis()  # canvas y grows downward
    ax.axis("off")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fig.savefig(path, dpi=100)
    plt.close(fig)

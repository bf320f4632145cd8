"""Shared fixtures for strokereplay tests."""

from __future__ import annotations

import math

import matplotlib
import pytest

matplotlib.use("Agg")

from strokereplay.data.stroke import Point, Stroke  # noqa: E402


def make_line_stroke(
    num_points: int,
    x_end: float,
    t_start: float = 0.0,
    t_end: float = 600.0,
    y: float = 0.0,
) -> Stroke:
    """Evenly spaced points on a horizontal line, evenly spaced in time."""
    last = num_points - 1
    return Stroke(tuple(
        Point(x_end * i / last, y, t_start + (t_end - t_start) * i / last)
        for i in range(num_points)
    ))


@pytest.fixture
def straight_stroke() -> Stroke:
    """12 points from (0, 0) to (110, 0) over 0-600ms."""
    return make_line_stroke(12, 110.0)


@pytest.fixture
def signature_strokes() -> list[Stroke]:
    """Three strokes of varied length with gaps between them, like a signature."""
    spiral = Stroke(tuple(
        Point(
            300 + (10 + 2 * i) * math.cos(i * 0.3),
            150 + (10 + 2 * i) * math.sin(i * 0.3),
            100.0 + 12.0 * i,
        )
        for i in range(57)
    ))
    dot = Stroke((Point(50, 50, 900.0), Point(51, 50, 905.0)))
    underline = make_line_stroke(250, 400.0, t_start=1000.0, t_end=2500.0, y=250.0)
    return [spiral, dot, underline]


@pytest.fixture
def frozen_time_stroke() -> Stroke:
    """A stroke whose samples all share one timestamp."""
    return Stroke(tuple(Point(float(i * 5), float(i), 42.0) for i in range(8)))

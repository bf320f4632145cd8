"""Arc-length helpers over captured point sequences."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def points_to_array(points: Sequence) -> np.ndarray:
    """Stack ``Point``-like objects (anything with ``x``/``y``) into an (N, 2) array."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([[p.x, p.y] for p in points], dtype=np.float64)


def cumulative_arc_length(xy: np.ndarray) -> np.ndarray:
    """Running arc length along an (N, 2) polyline, starting at 0.

    Returns an array of shape (N,). An empty input yields an empty array.
    """
    if len(xy) == 0:
        return np.zeros(0, dtype=np.float64)
    diffs = np.diff(xy, axis=0)
    seg_lengths = np.sqrt((diffs ** 2).sum(axis=1))
    return np.concatenate([[0.0], np.cumsum(seg_lengths)])


def polyline_length(points: Sequence) -> float:
    """Sum of Euclidean distances between consecutive points."""
    if len(points) < 2:
        return 0.0
    return float(cumulative_arc_length(points_to_array(points))[-1])

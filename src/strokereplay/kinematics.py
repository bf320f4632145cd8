"""Displacement and velocity series with invertible chart scales."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .analyzer import AnalysisRecord

DEFAULT_PIXEL_RANGE = (0.0, 600.0)


class ChartDomain(str, Enum):
    """Independent variable of a chart's x axis."""

    TIME = "time"
    DISTANCE = "distance"


@dataclass(frozen=True)
class LinearScale:
    """Linear map from a value domain to a pixel range, and back.

    A zero-width domain sends every value to ``range[0]`` and every pixel to
    ``domain[0]``. Works elementwise on numpy arrays.
    """

    domain: tuple[float, float]
    range: tuple[float, float]

    @classmethod
    def identity(cls, pixel_range: tuple[float, float] = DEFAULT_PIXEL_RANGE) -> LinearScale:
        return cls(domain=tuple(pixel_range), range=tuple(pixel_range))

    def __call__(self, value):
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return np.full(np.shape(value), r0, dtype=np.float64) if np.ndim(value) else r0
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel):
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return np.full(np.shape(pixel), d0, dtype=np.float64) if np.ndim(pixel) else d0
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)

    def contains_pixel(self, pixel: float) -> bool:
        lo, hi = sorted(self.range)
        return lo <= pixel <= hi


@dataclass(frozen=True)
class KinematicSeries:
    """Chart-ready series derived from one set of analysis records.

    Every array has shape (n, 2) with one row per record in index order:

    - ``displacement``: (end_time, cumulative_distance)
    - ``velocity_by_time``: (start_time, velocity)
    - ``velocity_by_distance``: (cumulative_distance, velocity)
    """

    displacement: np.ndarray
    velocity_by_time: np.ndarray
    velocity_by_distance: np.ndarray
    time_scale: LinearScale
    distance_scale: LinearScale
    velocity_domain: ChartDomain = ChartDomain.TIME

    @property
    def is_empty(self) -> bool:
        return len(self.displacement) == 0

    def __len__(self) -> int:
        return len(self.displacement)

    @property
    def end_times(self) -> np.ndarray:
        return self.displacement[:, 0]

    @property
    def cumulative_distances(self) -> np.ndarray:
        return self.displacement[:, 1]

    @property
    def velocity(self) -> np.ndarray:
        """Velocity series in the domain chosen at build time."""
        return self.velocity_series(self.velocity_domain)

    @property
    def velocity_max(self) -> float:
        if self.is_empty:
            return 0.0
        return float(self.velocity_by_time[:, 1].max())

    def velocity_series(self, domain: ChartDomain | str) -> np.ndarray:
        domain = ChartDomain(domain)
        if domain is ChartDomain.TIME:
            return self.velocity_by_time
        return self.velocity_by_distance

    def scale_for(self, domain: ChartDomain | str) -> LinearScale:
        domain = ChartDomain(domain)
        return self.time_scale if domain is ChartDomain.TIME else self.distance_scale


def build_series(
    records: Sequence[AnalysisRecord],
    total_duration: float,
    time_range: tuple[float, float] = DEFAULT_PIXEL_RANGE,
    distance_range: tuple[float, float] = DEFAULT_PIXEL_RANGE,
    velocity_domain: ChartDomain | str = ChartDomain.TIME,
) -> KinematicSeries:
    """Build displacement/velocity series and the time and distance scales.

    Args:
        records: Analysis records in index order.
        total_duration: Document duration in seconds; the time scale spans
            ``[0, total_duration]``.
        time_range: Pixel range of the time axis.
        distance_range: Pixel range of the distance axis.
        velocity_domain: Default independent variable of ``velocity``.

    Returns:
        A ``KinematicSeries``. With no records every series is empty and both
        scales are identities; such a series must not be rendered.
    """
    try:
        velocity_domain = ChartDomain(velocity_domain)
    except ValueError as exc:
        raise ValueError(
            f"velocity_domain must be 'time' or 'distance', got {velocity_domain!r}"
        ) from exc

    if not records:
        empty = np.zeros((0, 2), dtype=np.float64)
        return KinematicSeries(
            displacement=empty,
            velocity_by_time=empty.copy(),
            velocity_by_distance=empty.copy(),
            time_scale=LinearScale.identity(time_range),
            distance_scale=LinearScale.identity(distance_range),
            velocity_domain=velocity_domain,
        )

    ordered = sorted(records, key=lambda r: r.index)
    start = np.array([r.start_time for r in ordered], dtype=np.float64)
    end = np.array([r.end_time for r in ordered], dtype=np.float64)
    cumulative = np.array([r.cumulative_distance for r in ordered], dtype=np.float64)
    velocity = np.array([r.velocity for r in ordered], dtype=np.float64)

    return KinematicSeries(
        displacement=np.column_stack([end, cumulative]),
        velocity_by_time=np.column_stack([start, velocity]),
        velocity_by_distance=np.column_stack([cumulative, velocity]),
        time_scale=LinearScale((0.0, float(total_duration)), tuple(time_range)),
        distance_scale=LinearScale((0.0, float(cumulative.max())), tuple(distance_range)),
        velocity_domain=velocity_domain,
    )

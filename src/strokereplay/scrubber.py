"""Synchronized scrubbing across the time-domain and distance-domain charts.

A pointer position on either chart resolves to one analysis record. The
scrubber places cursors on both charts and seeks the replay to the matching
instant through an optional ``seek`` callable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from .analyzer import Analysis
from .errors import ExternalSeekFailure
from .kinematics import DEFAULT_PIXEL_RANGE, ChartDomain, KinematicSeries, build_series

logger = logging.getLogger(__name__)

# Relative slack so a value -> pixel -> value round trip lands on the same record.
_FLOOR_TOLERANCE = 1e-9


@dataclass(frozen=True)
class ScrubPosition:
    """Where a scrub event landed: the record, playback time and both cursor pixels."""

    record_index: int
    time: float
    distance: float
    time_px: float
    distance_px: float


def find_floor_index(values, target: float) -> int | None:
    """Index of the last entry ``<= target`` in non-decreasing ``values``.

    Falls back to the first entry when ``target`` precedes all of them.
    Returns ``None`` for an empty sequence.
    """
    values = np.asarray(values, dtype=np.float64)
    if len(values) == 0:
        return None
    span = max(abs(values[0]), abs(values[-1]), 1.0)
    idx = int(np.searchsorted(values, target + _FLOOR_TOLERANCE * span, side="right")) - 1
    return max(idx, 0)


class Scrubber:
    """Maps chart pixels to records and keeps the last cursor position.

    Args:
        series: Series built from the current analysis records.
        seek: Called with the recovered playback time in seconds. May raise
            ``ExternalSeekFailure``, which is logged and otherwise ignored.
    """

    def __init__(
        self,
        series: KinematicSeries,
        seek: Callable[[float], None] | None = None,
    ) -> None:
        self.series = series
        self.seek = seek
        self.cursor: ScrubPosition | None = None

    @classmethod
    def from_analysis(
        cls,
        analysis: Analysis,
        time_range: tuple[float, float] = DEFAULT_PIXEL_RANGE,
        distance_range: tuple[float, float] = DEFAULT_PIXEL_RANGE,
        seek: Callable[[float], None] | None = None,
    ) -> Scrubber:
        series = build_series(
            analysis.records,
            analysis.total_duration,
            time_range=time_range,
            distance_range=distance_range,
        )
        return cls(series, seek=seek)

    def resolve(self, pixel: float, domain: ChartDomain | str) -> ScrubPosition | None:
        """Compute the synchronized position for ``pixel`` without side effects."""
        domain = ChartDomain(domain)
        series = self.series
        if series.is_empty:
            return None
        scale = series.scale_for(domain)
        if not scale.contains_pixel(pixel):
            return None

        value = float(scale.invert(pixel))
        if domain is ChartDomain.TIME:
            idx = find_floor_index(series.end_times, value)
            time = value
            distance = float(series.cumulative_distances[idx])
        else:
            idx = find_floor_index(series.cumulative_distances, value)
            time = float(series.end_times[idx])
            distance = float(series.cumulative_distances[idx])

        return ScrubPosition(
            record_index=idx,
            time=time,
            distance=distance,
            time_px=float(series.time_scale(time)),
            distance_px=float(series.distance_scale(distance)),
        )

    def scrub(self, pixel: float, domain: ChartDomain | str) -> ScrubPosition | None:
        """Resolve ``pixel``, move the cursor and seek the replay.

        Outside the chart or with no records this is a no-op returning ``None``.
        """
        position = self.resolve(pixel, domain)
        if position is None:
            return None

        self.cursor = position
        if self.seek is not None:
            try:
                self.seek(position.time)
            except ExternalSeekFailure as exc:
                logger.warning("Replay refused seek to %.3fs: %s", position.time, exc)
        return position

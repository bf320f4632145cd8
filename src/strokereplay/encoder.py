"""Adaptive segmentation of timed strokes into time-gated animation segments.

Each stroke is cut into short overlapping polylines. Every segment gets a
normalized visibility window ``[t1, t2]`` within the whole capture's duration,
so a replay reveals the drawing at the pace it was performed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, CodecConfig
from .data.processing import polyline_length
from .data.stroke import Point, Stroke
from .errors import InsufficientInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """A bounded, time-gated slice of one stroke.

    ``points`` includes the connective point shared with the previous segment
    of the same stroke (for every segment but a stroke's first).
    """

    points: tuple[Point, ...]
    stroke_index: int
    t1: float
    t2: float

    @property
    def start_time(self) -> float:
        return self.points[0].time

    @property
    def end_time(self) -> float:
        return self.points[-1].time

    def length(self) -> float:
        return polyline_length(self.points)


@dataclass(frozen=True)
class AnimatedDocument:
    """In-memory form of an encoded capture, rendered to SVG only on serialization."""

    width: int
    height: int
    segments: tuple[Segment, ...]
    total_duration: float  # seconds
    stroke_color: str = DEFAULT_CONFIG.stroke_color
    stroke_width: float = DEFAULT_CONFIG.stroke_width

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def __len__(self) -> int:
        return len(self.segments)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def points_per_segment(num_points: int, config: CodecConfig = DEFAULT_CONFIG) -> int:
    """Window size for a stroke of ``num_points`` points.

    Aims for ``target_segments_per_stroke`` segments, clamped so that short
    strokes get a few coarse segments and long strokes many bounded ones.
    """
    size = _round_half_up(num_points / config.target_segments_per_stroke)
    return max(config.min_points_per_segment, min(config.max_points_per_segment, size))


def split_stroke(stroke: Stroke, config: CodecConfig = DEFAULT_CONFIG) -> list[tuple[Point, ...]]:
    """Cut a stroke into windows, each after the first prefixed by its predecessor's last point.

    Strokes shorter than ``min_points_per_segment`` yield no windows.
    """
    points = stroke.points
    if len(points) < config.min_points_per_segment:
        return []

    size = points_per_segment(len(points), config)
    windows = []
    for start in range(0, len(points), size):
        window = points[start:start + size]
        if start > 0:
            window = (points[start - 1],) + window
        if len(window) < 2:
            continue
        windows.append(window)
    return windows


def _session_bounds(strokes: Sequence[Stroke]) -> tuple[float, float]:
    return strokes[0].start_time, strokes[-1].end_time


def _normalize(time: float, origin: float, safe_duration: float) -> float:
    t = (time - origin) / 1000.0 / safe_duration
    return min(1.0, max(0.0, t))


def encode(strokes: Sequence[Stroke], config: CodecConfig | None = None) -> AnimatedDocument:
    """Encode strokes into an animated document.

    Args:
        strokes: Captured strokes in drawing order.
        config: Segmentation and canvas settings; defaults to ``DEFAULT_CONFIG``.

    Returns:
        An ``AnimatedDocument`` whose segments follow stroke-then-window order.
        With no animatable stroke the document is empty; rejecting such input
        is the caller's job (see ``require_encodable``).
    """
    config = (config or DEFAULT_CONFIG).validate()

    if not strokes:
        return AnimatedDocument(
            width=config.canvas_width,
            height=config.canvas_height,
            segments=(),
            total_duration=0.0,
            stroke_color=config.stroke_color,
            stroke_width=config.stroke_width,
        )

    origin, last = _session_bounds(strokes)
    total_duration = (last - origin) / 1000.0
    if total_duration < 0:
        logger.debug("Negative capture duration %.3fs, treating as 0", total_duration)
        total_duration = 0.0
    safe_duration = total_duration if total_duration > 0 else 1.0

    segments = []
    for stroke_index, stroke in enumerate(strokes):
        windows = split_stroke(stroke, config)
        if not windows:
            logger.debug(
                "Dropping stroke %d with %d points (minimum %d)",
                stroke_index, len(stroke), config.min_points_per_segment,
            )
            continue
        for window in windows:
            segments.append(Segment(
                points=window,
                stroke_index=stroke_index,
                t1=_normalize(window[0].time, origin, safe_duration),
                t2=_normalize(window[-1].time, origin, safe_duration),
            ))

    logger.debug(
        "Encoded %d strokes into %d segments over %.3fs",
        len(strokes), len(segments), total_duration,
    )
    return AnimatedDocument(
        width=config.canvas_width,
        height=config.canvas_height,
        segments=tuple(segments),
        total_duration=total_duration,
        stroke_color=config.stroke_color,
        stroke_width=config.stroke_width,
    )


def require_encodable(strokes: Sequence[Stroke], config: CodecConfig | None = None) -> None:
    """Reject a capture in which no stroke has enough points for one segment.

    Raises:
        InsufficientInputError: if even the longest stroke has fewer than
            ``min_points_per_segment`` points.
    """
    config = config or DEFAULT_CONFIG
    found = max((len(s) for s in strokes), default=0)
    if found < config.min_points_per_segment:
        raise InsufficientInputError(found, config.min_points_per_segment)

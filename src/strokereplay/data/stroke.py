"""Captured gesture data: timestamped points, strokes and the capture session.

Timestamps are relative milliseconds from an arbitrary session-local origin.
No wall-clock epoch is assumed; the only requirement is that time never
decreases within a stroke.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .processing import polyline_length

if TYPE_CHECKING:
    from ..config import CodecConfig
    from ..encoder import AnimatedDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A single pointer sample."""

    x: float
    y: float
    time: float


@dataclass(frozen=True)
class Stroke:
    """Contiguous samples between one pointer-down and the following pointer-up."""

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))
        if not self.points:
            raise ValueError("A stroke needs at least one point")
        for prev, cur in zip(self.points, self.points[1:]):
            if cur.time < prev.time:
                raise ValueError(
                    f"Stroke timestamps must be non-decreasing ({cur.time} after {prev.time})"
                )

    @classmethod
    def from_tuples(cls, samples: Iterable[tuple[float, float, float]]) -> Stroke:
        """Build a stroke from ``(x, y, time)`` triples."""
        return cls(tuple(Point(float(x), float(y), float(t)) for x, y, t in samples))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx):
        return self.points[idx]

    @property
    def start_time(self) -> float:
        return self.points[0].time

    @property
    def end_time(self) -> float:
        return self.points[-1].time

    def length(self) -> float:
        """Polyline arc length through all points."""
        return polyline_length(self.points)


class CaptureSession:
    """In-progress capture of one gesture.

    Owned by the caller and driven by discrete pointer events. Sealed strokes
    are immutable; ``reset`` discards the whole capture. After ``generate`` the
    next pointer-down starts a fresh capture.

    Typical usage::

        session = CaptureSession()
        session.pointer_down(10, 10, 0.0)
        session.pointer_move(12, 11, 16.0)
        session.pointer_up()
        doc = session.generate()
    """

    def __init__(self) -> None:
        self._sealed: list[Stroke] = []
        self._open: list[Point] | None = None
        self._new_capture = False

    @property
    def is_drawing(self) -> bool:
        return self._open is not None

    def pointer_down(self, x: float, y: float, time: float) -> None:
        if self._new_capture:
            self.reset()
        if self._open is not None:
            # A missed pointer-up; close the dangling stroke instead of merging.
            self.pointer_up()
        self._open = [Point(float(x), float(y), float(time))]

    def pointer_move(self, x: float, y: float, time: float) -> None:
        if self._open is None:
            return
        last = self._open[-1]
        if time < last.time:
            logger.debug("Clamping out-of-order sample at %.3f to %.3f", time, last.time)
            time = last.time
        self._open.append(Point(float(x), float(y), float(time)))

    def pointer_up(self) -> None:
        if self._open is None:
            return
        self._sealed.append(Stroke(tuple(self._open)))
        self._open = None

    def reset(self) -> None:
        self._sealed = []
        self._open = None
        self._new_capture = False

    @property
    def strokes(self) -> tuple[Stroke, ...]:
        """Sealed strokes, followed by the open stroke if one is in progress."""
        if self._open:
            return (*self._sealed, Stroke(tuple(self._open)))
        return tuple(self._sealed)

    def point_count(self) -> int:
        return sum(len(s) for s in self.strokes)

    def first_time(self) -> float | None:
        strokes = self.strokes
        return strokes[0].start_time if strokes else None

    def last_time(self) -> float | None:
        strokes = self.strokes
        return strokes[-1].end_time if strokes else None

    def generate(self, config: CodecConfig | None = None) -> AnimatedDocument:
        """Encode the current capture into an animated document.

        The capture stays readable until the next pointer-down, which
        discards it and begins a new one.

        Raises:
            InsufficientInputError: if the capture has too few points.
        """
        from ..encoder import encode, require_encodable

        strokes = self.strokes
        require_encodable(strokes, config)
        doc = encode(strokes, config)
        self._new_capture = True
        return doc
